"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante la conversión por lotes.

Los eventos son de negocio ("se convirtió la fila 3", "el CCI de la fila 5
es de un banco desconocido"), no niveles de log. La implementación decide
cómo mostrarlos:
- En desarrollo/terminal: ConsoleLogger imprime a consola.
- En tests: un logger en memoria acumula eventos para hacer asserts.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Entrada ---

    @abstractmethod
    def log_batch_received(self, origen: str, num_solicitudes: int) -> None:
        """Registra que se recibió un lote para procesar.

        Args:
            origen: De dónde viene el lote (nombre de archivo, 'cli', etc.).
            num_solicitudes: Cantidad de filas a procesar.
        """
        ...

    # --- Procesamiento ---

    @abstractmethod
    def log_conversion_ok(self, fila: int, banco: str, cci: str) -> None:
        """Registra una conversión exitosa."""
        ...

    @abstractmethod
    def log_conversion_failed(self, fila: int, motivo: str) -> None:
        """Registra una fila que no se pudo convertir.

        Args:
            fila: Fila del archivo de origen.
            motivo: Descripción legible del problema.
        """
        ...

    @abstractmethod
    def log_error(self, origen: str, error: Exception) -> None:
        """Registra un error que impide procesar todo el origen
        (archivo ilegible, salida no escribible, etc.)."""
        ...

    # --- Salida ---

    @abstractmethod
    def log_output_written(self, output_path: Path, num_resultados: int) -> None:
        """Registra que se generó el archivo de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'solicitudes_recibidas': int,
                'conversiones_exitosas': int,
                'conversiones_fallidas': int,
                'errores': List[dict],  # [{fila|origen, error}]
            }
        """
        ...
