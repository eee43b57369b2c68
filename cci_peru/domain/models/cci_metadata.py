"""
Modelo de dominio: Metadatos decodificados de un CCI.

Es una unión etiquetada por banco:
- BCPCCIMetadata: solo BCP. Además de la cuenta trae moneda y tipo.
- CCIMetadata: el resto de bancos, solo banco + cuenta + CCI.

Son dos dataclasses independientes (sin herencia) para que un
`isinstance(meta, BCPCCIMetadata)` sea la única forma de saber si hay
moneda/tipo disponibles.
"""

from dataclasses import dataclass

from cci_peru.domain.models.bank_code import NOMBRES_BANCOS
from cci_peru.domain.shared.digits import is_digit_string


def _validar_cci(cci: str) -> None:
    if not is_digit_string(cci, 20):
        raise ValueError(f"CCI inválido: '{cci}'. Debe tener 20 dígitos")


@dataclass(frozen=True)
class BCPCCIMetadata:
    """Metadatos de un CCI del BCP."""

    account_number: str
    """Número de cuenta reconstruido. 14 dígitos para Ahorro, 13 para el
    resto (el layout de Corriente descarta el dígito de la posición 7)."""

    cci: str
    """CCI original de 20 dígitos."""

    currency: str
    """'PEN' si el dígito 15 del CCI es '0', si no 'USD'."""

    account_type: str
    """'Ahorro' si el dígito 6 del CCI es '1', si no 'Corriente'."""

    bank: str = "BCP"

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.bank != "BCP":
            raise ValueError(f"BCPCCIMetadata solo aplica a BCP, no a '{self.bank}'")
        _validar_cci(self.cci)
        if self.currency not in ("PEN", "USD"):
            raise ValueError(f"Moneda no reconocida: '{self.currency}'. Esperado: PEN o USD")
        if self.account_type not in ("Ahorro", "Corriente"):
            raise ValueError(
                f"Tipo de cuenta no reconocido: '{self.account_type}'. "
                f"Esperado: Ahorro o Corriente"
            )


@dataclass(frozen=True)
class CCIMetadata:
    """Metadatos de un CCI de cualquier banco distinto de BCP."""

    bank: str
    """Nombre normalizado: 'INTERBANK', 'BBVA', 'SCOTIABANK', 'BANBIF',
    'MI BANCO' o 'BANCO DE LA NACION'."""

    account_number: str
    """Número de cuenta reconstruido a partir del CCI."""

    cci: str
    """CCI original de 20 dígitos."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.bank == "BCP":
            raise ValueError("Los CCI de BCP se representan con BCPCCIMetadata")
        if self.bank not in NOMBRES_BANCOS:
            raise ValueError(f"Banco no soportado: '{self.bank}'")
        _validar_cci(self.cci)
