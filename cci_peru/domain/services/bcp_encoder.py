"""
Servicio de dominio: Conversión de cuentas BCP a CCI.

Layout del CCI BCP (20 dígitos):

    002 | AAA | T | BBBBBBBBBBB | D1 | D2
    ----+-----+---+-------------+----+---
    banco  cuenta[0:3]  tipo  cuenta[3:14]  dígitos de control

- Grupo 1 = "002" + cuenta[0:3]         → D1
- Grupo 2 = tipo + cuenta[3:14]         → D2
"""

from cci_peru.domain.models.bank_code import BankCode, BCPAccountType
from cci_peru.domain.shared.check_digit import bcp_check_digit
from cci_peru.domain.shared.digits import is_digit_string


def convert_bcp_account_number_to_cci(
    account_number: str,
    account_type: BCPAccountType | str,
) -> str | None:
    """Convierte un número de cuenta BCP de 14 dígitos a CCI.

    Args:
        account_number: Número de cuenta BCP, exactamente 14 dígitos.
        account_type: Tipo de cuenta. Acepta el enum o su valor ("1", "2", "3").

    Returns:
        CCI de 20 dígitos, o None si la cuenta no tiene 14 dígitos
        numéricos o el tipo no es válido. Nunca lanza.

    Ejemplos:
        >>> convert_bcp_account_number_to_cci("19205678912345", BCPAccountType.SAVINGS)
        '00219210567891234533'
        >>> convert_bcp_account_number_to_cci("1920567891234", "1") is None
        True
    """
    if not is_digit_string(account_number, 14):
        return None
    try:
        tipo = BCPAccountType(account_type)
    except ValueError:
        return None

    segmento1 = account_number[:3]
    # Con 14 dígitos esto ya mide 11; el relleno cubre el layout igual.
    segmento2 = account_number[3:].zfill(11)

    grupo1 = BankCode.BCP.value + segmento1
    grupo2 = tipo.value + segmento2

    return f"{grupo1}{grupo2}{bcp_check_digit(grupo1)}{bcp_check_digit(grupo2)}"
