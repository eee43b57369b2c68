"""
Puerto de entrada: Lector de solicitudes de conversión.

Define el contrato para obtener las filas a convertir desde un archivo.
El ConversionProcessor no sabe si vienen de un CSV, un Excel o cualquier
otra fuente; solo recibe SolicitudConversion.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from cci_peru.domain.models.solicitud_conversion import SolicitudConversion


class AccountReader(ABC):
    """Interfaz para leer solicitudes de conversión."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Indica si este lector puede procesar el archivo (por extensión)."""
        ...

    @abstractmethod
    def read(self, file_path: Path) -> list[SolicitudConversion]:
        """Lee el archivo y devuelve una solicitud por fila con datos.

        Raises:
            FormatoInvalidoError: Si el archivo no existe, la extensión no
                                  está soportada o faltan columnas.
            LecturaError: Si el archivo no se puede leer.
        """
        ...
