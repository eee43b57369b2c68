"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los resultados de un lote en algún
formato persistente. Hoy es Excel; el dominio no conoce el formato.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from cci_peru.domain.models.resultado_conversion import ResultadoConversion


class OutputWriter(ABC):
    """Interfaz para escribir resultados de conversión."""

    @abstractmethod
    def write(self, resultados: Sequence[ResultadoConversion], output_path: Path) -> Path:
        """Escribe los resultados de un lote.

        Args:
            resultados: Resultados en el orden de las filas de entrada.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, archivo abierto, etc.)
        """
        ...
