"""
Utilidades compartidas del dominio.

No dependen de ninguna librería externa. Solo operan sobre tipos nativos
de Python.

Uso:
    from cci_peru.domain.shared.check_digit import bcp_check_digit, weighted_check_digit
    from cci_peru.domain.shared.digits import is_digit_string
"""
