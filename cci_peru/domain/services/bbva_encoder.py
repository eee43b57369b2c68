"""
Servicio de dominio: Conversión de cuentas BBVA a CCI.

La cuenta BBVA llega en dos formas:

    18 dígitos:  EEEE OOOO CC NNNNNNNN
    20 dígitos:  EEEE OOOO xx CC NNNNNNNN   (xx se ignora)

    E = entidad, O = oficina, C = control, N = cuenta

Layout del CCI resultante (20 dígitos):

    EEE | OOO | 00 | CC | NNNNNNNN | D1 | D2

La entidad y la oficina pierden su primer dígito en el CCI.
"""

from cci_peru.domain.shared.check_digit import (
    BBVA_ACCOUNT_WEIGHTS,
    BBVA_BANK_BRANCH_WEIGHTS,
    weighted_check_digit,
)
from cci_peru.domain.shared.digits import is_digit_string


def convert_bbva_account_number_to_cci(account_number: str) -> str | None:
    """Convierte un número de cuenta BBVA de 18 o 20 dígitos a CCI.

    Args:
        account_number: Número de cuenta BBVA, 18 o 20 dígitos.

    Returns:
        CCI de 20 dígitos, o None si la entrada no tiene 18 ni 20 dígitos
        numéricos. Nunca lanza.

    Ejemplos:
        >>> convert_bbva_account_number_to_cci("001101230100012345")
        '01112300010001234573'
        >>> convert_bbva_account_number_to_cci("00110123990100012345")
        '01112300010001234573'
    """
    if not is_digit_string(account_number, 18, 20):
        return None

    entidad = account_number[0:4]
    oficina = account_number[4:8]

    if len(account_number) == 18:
        control = account_number[8:10]
        cuenta = account_number[10:18]
    else:
        control = account_number[10:12]
        cuenta = account_number[12:20]

    digito1 = weighted_check_digit(entidad + oficina, BBVA_BANK_BRANCH_WEIGHTS)
    digito2 = weighted_check_digit(control + cuenta, BBVA_ACCOUNT_WEIGHTS)

    return f"{entidad[1:]}{oficina[1:]}00{control}{cuenta}{digito1}{digito2}"
