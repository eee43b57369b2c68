"""
Modelo de dominio: Solicitud de conversión (una fila de un lote).

La produce el AccountReader a partir de un CSV/Excel y la consume el
ConversionProcessor. No valida el contenido de `valor`: una cuenta mal
formada es un resultado con error, no una solicitud inválida.
"""

from dataclasses import dataclass

OPERACION_CODIFICAR = "codificar"
OPERACION_DECODIFICAR = "decodificar"


@dataclass(frozen=True)
class SolicitudConversion:
    """Una cuenta a convertir a CCI, o un CCI a decodificar."""

    fila: int
    """Número de fila en el archivo de origen (1-indexed, sin encabezado).
    Se guarda para que el reporte de errores apunte a la fila exacta."""

    operacion: str
    """'codificar' (cuenta → CCI) o 'decodificar' (CCI → cuenta)."""

    valor: str
    """Número de cuenta (codificar) o CCI (decodificar), como texto."""

    banco: str = ""
    """Banco de la cuenta. Obligatorio al codificar; al decodificar se
    deduce del CCI y este campo se ignora."""

    tipo_cuenta: str = ""
    """Tipo de cuenta BCP ('1', 'ahorro', 'corriente', 'cts'...). Vacío
    equivale a ahorro. Solo aplica a BCP."""

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if self.operacion not in (OPERACION_CODIFICAR, OPERACION_DECODIFICAR):
            raise ValueError(
                f"Operación no reconocida: '{self.operacion}'. "
                f"Esperado: {OPERACION_CODIFICAR} o {OPERACION_DECODIFICAR}"
            )
        if self.fila < 1:
            raise ValueError(f"Fila fuera de rango: {self.fila}. Debe ser >= 1")
        if self.operacion == OPERACION_CODIFICAR and not self.banco.strip():
            raise ValueError("El banco es obligatorio para codificar una cuenta")
