"""
Servicio de dominio: Decodificación de un CCI.

Dado un CCI de 20 dígitos, identifica el banco por su prefijo y
reconstruye el número de cuenta original extrayendo posiciones fijas.

BCP es el único banco con lógica propia: el dígito 6 define el tipo de
cuenta (y con él qué posiciones forman la cuenta) y el dígito 15 la
moneda. Para el resto basta una tabla de extracción.
"""

from cci_peru.domain.models.cci_metadata import BCPCCIMetadata, CCIMetadata
from cci_peru.domain.services.bank_identifier import get_bank_from_cci

# banco → (prefijo literal, rangos [inicio, fin) del CCI que se concatenan)
_REGLAS_EXTRACCION: dict[str, tuple[str, tuple[tuple[int, int], ...]]] = {
    "INTERBANK": ("", ((3, 6), (8, 18))),
    "BBVA": ("00110", ((3, 6), (8, 18))),
    "SCOTIABANK": ("", ((3, 6), (11, 18))),
    "BANBIF": ("0", ((7, 18),)),
    "MI BANCO": ("", ((8, 18),)),
    "BANCO DE LA NACION": ("", ((7, 18),)),
}


def get_cci_metadata(cci: str) -> BCPCCIMetadata | CCIMetadata:
    """Decodifica un CCI en banco + número de cuenta.

    Args:
        cci: CCI de 20 dígitos.

    Returns:
        BCPCCIMetadata para CCIs del BCP (incluye moneda y tipo de cuenta).
        CCIMetadata para el resto de bancos.

    Raises:
        CCIFormatoInvalidoError: Si el CCI no tiene exactamente 20 dígitos.
        BancoDesconocidoError: Si el prefijo no corresponde a ningún banco.

    Ejemplos:
        >>> get_cci_metadata("00219210567891234533").account_number
        '19205678912345'
        >>> get_cci_metadata("01800000401234567812").account_number
        '04012345678'
    """
    banco = get_bank_from_cci(cci)

    if banco == "BCP":
        return _decode_bcp(cci)

    prefijo, rangos = _REGLAS_EXTRACCION[banco]
    cuenta = prefijo + "".join(cci[inicio:fin] for inicio, fin in rangos)
    return CCIMetadata(bank=banco, account_number=cuenta, cci=cci)


def _decode_bcp(cci: str) -> BCPCCIMetadata:
    """Decodifica un CCI del BCP.

    Ahorro ('1' en la posición 6) conserva los 11 dígitos de la posición
    7 a la 17. Cualquier otro tipo se reporta como Corriente y salta la
    posición 7.
    """
    moneda = "PEN" if cci[15] == "0" else "USD"

    if cci[6] == "1":
        return BCPCCIMetadata(
            account_number=cci[3:6] + cci[7:18],
            cci=cci,
            currency=moneda,
            account_type="Ahorro",
        )

    return BCPCCIMetadata(
        account_number=cci[3:6] + cci[8:18],
        cci=cci,
        currency=moneda,
        account_type="Corriente",
    )
