"""
Validación de cadenas numéricas.

Solo se aceptan dígitos ASCII 0-9. `str.isdigit()` NO sirve aquí porque
devuelve True para dígitos de otros alfabetos ('٣', '²'), y un CCI con
esos caracteres debe rechazarse igual que uno con letras.
"""

import re

_DIGITOS = re.compile(r"[0-9]+")


def is_digit_string(text: object, *lengths: int) -> bool:
    """Indica si `text` es un str formado solo por dígitos ASCII.

    Si se pasan longitudes, además exige que su largo sea una de ellas.

    Ejemplos:
        >>> is_digit_string("19205678912345", 14)
        True
        >>> is_digit_string("001101230100012345", 18, 20)
        True
        >>> is_digit_string("12a4")
        False
    """
    if not isinstance(text, str) or not _DIGITOS.fullmatch(text):
        return False
    return not lengths or len(text) in lengths
