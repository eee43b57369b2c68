"""
Modelo de dominio: Códigos de banco y tipos de cuenta BCP.

El CCI siempre empieza con el código de 3 dígitos de la entidad emisora.
Estas tablas son constantes del proceso: nadie las modifica en tiempo
de ejecución.
"""

from enum import Enum


class BankCode(str, Enum):
    """Código de 3 dígitos (con ceros iniciales) de cada banco soportado."""

    BCP = "002"
    INTERBANK = "003"
    SCOTIABANK = "009"
    BBVA = "011"
    BANCO_DE_LA_NACION = "018"
    BANBIF = "038"
    MI_BANCO = "049"


class BCPAccountType(str, Enum):
    """Tipo de cuenta BCP. Es el primer dígito del segundo grupo del CCI."""

    SAVINGS = "1"
    CHECKING = "2"
    CTS = "3"


# Cada tupla: (nombre_normalizado, código). El nombre es el que devuelve
# get_bank_from_cci y el que aparece en CCIMetadata.bank.
BANCOS_CCI: tuple[tuple[str, str], ...] = (
    ("BCP", BankCode.BCP.value),
    ("INTERBANK", BankCode.INTERBANK.value),
    ("SCOTIABANK", BankCode.SCOTIABANK.value),
    ("BBVA", BankCode.BBVA.value),
    ("BANCO DE LA NACION", BankCode.BANCO_DE_LA_NACION.value),
    ("BANBIF", BankCode.BANBIF.value),
    ("MI BANCO", BankCode.MI_BANCO.value),
)

NOMBRES_BANCOS: frozenset[str] = frozenset(nombre for nombre, _ in BANCOS_CCI)

# Alias textuales aceptados para el tipo de cuenta BCP (archivos y CLI).
_TIPOS_CUENTA_BCP: dict[str, BCPAccountType] = {
    "1": BCPAccountType.SAVINGS,
    "AHORRO": BCPAccountType.SAVINGS,
    "AHORROS": BCPAccountType.SAVINGS,
    "SAVINGS": BCPAccountType.SAVINGS,
    "2": BCPAccountType.CHECKING,
    "CORRIENTE": BCPAccountType.CHECKING,
    "CHECKING": BCPAccountType.CHECKING,
    "3": BCPAccountType.CTS,
    "CTS": BCPAccountType.CTS,
}


def parse_bcp_account_type(text: str) -> BCPAccountType | None:
    """Convierte un texto a BCPAccountType.

    Acepta el valor del enum ('1', '2', '3') o su nombre en castellano o
    inglés, sin importar mayúsculas ni espacios alrededor.

    Returns:
        BCPAccountType o None si el texto no se reconoce.

    Ejemplos:
        >>> parse_bcp_account_type("ahorro")
        <BCPAccountType.SAVINGS: '1'>
        >>> parse_bcp_account_type(" CTS ")
        <BCPAccountType.CTS: '3'>
        >>> parse_bcp_account_type("plazo fijo") is None
        True
    """
    if not isinstance(text, str):
        return None
    return _TIPOS_CUENTA_BCP.get(text.strip().upper())
