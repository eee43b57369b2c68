"""
Algoritmos de dígito de control de los CCI.

Ambos son variantes de Luhn: se multiplica cada dígito por un peso, los
productos de dos cifras se reducen a una, se suma todo y el dígito de
control es lo que falta para llegar a la siguiente decena:
    (10 - suma % 10) % 10

Hay DOS reglas de reducción y se mantienen separadas:
- BCP: suma de todos los dígitos decimales del producto (16 → 1 + 6).
- BBVA: producto // 10 + producto % 10.

Con los pesos actuales (máximo 2) el producto nunca pasa de 18 y ambas
reglas dan lo mismo. Si algún día aparece una tabla de pesos mayores,
dejan de ser equivalentes; por eso no se fusionan en una sola.
"""

from collections.abc import Sequence

from cci_peru.domain.shared.digits import is_digit_string

# Pesos del primer dígito de control BBVA (entidad + oficina, 8 dígitos).
BBVA_BANK_BRANCH_WEIGHTS: tuple[int, ...] = (0, 1, 2, 1, 0, 2, 1, 2)

# Pesos del segundo dígito de control BBVA (control + cuenta, 10 dígitos).
BBVA_ACCOUNT_WEIGHTS: tuple[int, ...] = (1, 2, 1, 2, 1, 2, 1, 2, 1, 2)


def _complemento_decena(suma: int) -> int:
    return (10 - (suma % 10)) % 10


def bcp_check_digit(group: str) -> int:
    """Calcula el dígito de control BCP de un grupo de dígitos.

    Pesos alternados 1, 2, 1, 2... empezando por el índice 0. Cada
    producto se reduce sumando todos sus dígitos.

    Args:
        group: Grupo de dígitos. En el CCI BCP son "002" + 3 dígitos
               (grupo 1) o tipo + 11 dígitos (grupo 2).

    Returns:
        Dígito de control entre 0 y 9.

    Raises:
        ValueError: Si el grupo está vacío o tiene caracteres no numéricos.

    Ejemplos:
        >>> bcp_check_digit("002192")
        3
        >>> bcp_check_digit("105678912345")
        3
    """
    if not is_digit_string(group):
        raise ValueError(f"El grupo debe contener solo dígitos: '{group}'")

    suma = 0
    for index, char in enumerate(group):
        producto = int(char) * (1 if index % 2 == 0 else 2)
        suma += sum(int(d) for d in str(producto))
    return _complemento_decena(suma)


def weighted_check_digit(digits: str, weights: Sequence[int]) -> int:
    """Calcula un dígito de control ponderado con la reducción de BBVA.

    Args:
        digits: Dígitos de entrada.
        weights: Un peso por dígito, misma longitud que `digits`.

    Returns:
        Dígito de control entre 0 y 9.

    Raises:
        ValueError: Si `digits` no es numérico o no coincide en longitud
                    con `weights`.

    Ejemplos:
        >>> weighted_check_digit("00110123", BBVA_BANK_BRANCH_WEIGHTS)
        7
        >>> weighted_check_digit("0100012345", BBVA_ACCOUNT_WEIGHTS)
        3
    """
    if not is_digit_string(digits):
        raise ValueError(f"La entrada debe contener solo dígitos: '{digits}'")
    if len(digits) != len(weights):
        raise ValueError(
            f"Se esperaban {len(weights)} dígitos para los pesos dados, "
            f"se recibieron {len(digits)}: '{digits}'"
        )

    suma = 0
    for char, peso in zip(digits, weights):
        producto = int(char) * peso
        if producto >= 10:
            producto = producto // 10 + producto % 10
        suma += producto
    return _complemento_decena(suma)
