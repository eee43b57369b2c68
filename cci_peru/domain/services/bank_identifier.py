"""
Servicio de dominio: Identificación del banco emisor de un CCI.

Los 3 primeros dígitos del CCI son el código de la entidad. Se busca
en la tabla estática BANCOS_CCI (7 entradas, escaneo lineal).
"""

from cci_peru.domain.exceptions import BancoDesconocidoError, CCIFormatoInvalidoError
from cci_peru.domain.models.bank_code import BANCOS_CCI
from cci_peru.domain.shared.digits import is_digit_string


def get_bank_from_cci(cci: str) -> str:
    """Identifica el banco de un CCI.

    Args:
        cci: CCI de 20 dígitos.

    Returns:
        Nombre normalizado del banco ('BCP', 'BBVA', 'MI BANCO', etc.).

    Raises:
        CCIFormatoInvalidoError: Si el CCI no tiene exactamente 20 dígitos.
        BancoDesconocidoError: Si el prefijo no corresponde a ningún banco.

    Ejemplos:
        >>> get_bank_from_cci("01800000401234567812")
        'BANCO DE LA NACION'
    """
    if not is_digit_string(cci, 20):
        raise CCIFormatoInvalidoError(cci)

    codigo = cci[:3]
    for nombre, codigo_banco in BANCOS_CCI:
        if codigo_banco == codigo:
            return nombre

    raise BancoDesconocidoError(cci, codigo)
