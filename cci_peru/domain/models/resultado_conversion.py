"""
Modelo de dominio: Resultado de procesar una SolicitudConversion.

Es la vista uniforme de las dos políticas de error del núcleo: el None de
los codificadores y las excepciones del decodificador terminan ambos en
el campo `error`. Lo produce el ConversionProcessor y lo consume el
OutputWriter.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultadoConversion:
    """Resultado de una conversión. Exitoso si `error` está vacío."""

    fila: int
    operacion: str

    banco: str = ""
    """Nombre normalizado del banco. Vacío si no se pudo identificar."""

    cuenta: str = ""
    """Número de cuenta: el de entrada al codificar, el reconstruido al decodificar."""

    cci: str = ""
    """CCI: el generado al codificar, el de entrada al decodificar."""

    moneda: str = ""
    """Solo CCIs BCP decodificados: 'PEN' o 'USD'."""

    tipo: str = ""
    """Solo CCIs BCP decodificados: 'Ahorro' o 'Corriente'."""

    error: str = ""
    """Descripción del error. Vacío si la conversión fue exitosa."""

    @property
    def exitoso(self) -> bool:
        return not self.error
