"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con
un formato consistente y acumula contadores para el resumen final.
"""

from pathlib import Path

from cci_peru.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de conversión a consola."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Args:
            verbose: Si False, no imprime cada conversión exitosa (útil con
                     lotes grandes). Los fallos y errores se imprimen siempre.
        """
        self._verbose = verbose
        self._solicitudes_recibidas: int = 0
        self._conversiones_exitosas: int = 0
        self._conversiones_fallidas: int = 0
        self._errores: list[dict] = []

    # --- Entrada ---

    def log_batch_received(self, origen: str, num_solicitudes: int) -> None:
        self._solicitudes_recibidas += num_solicitudes
        print(f"  📄 Recibido: {origen} ({num_solicitudes} registros)")

    # --- Procesamiento ---

    def log_conversion_ok(self, fila: int, banco: str, cci: str) -> None:
        self._conversiones_exitosas += 1
        if self._verbose:
            print(f"  ✅ Fila {fila}: {banco} — {cci}")

    def log_conversion_failed(self, fila: int, motivo: str) -> None:
        self._conversiones_fallidas += 1
        self._errores.append({"fila": fila, "error": motivo})
        print(f"  ⚠️  Fila {fila}: {motivo}")

    def log_error(self, origen: str, error: Exception) -> None:
        self._errores.append({"origen": origen, "error": str(error)})
        print(f"  ❌ Error: {origen} — {error}")

    # --- Salida ---

    def log_output_written(self, output_path: Path, num_resultados: int) -> None:
        print(f"\n📁 Excel generado: {output_path} ({num_resultados} filas)")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "solicitudes_recibidas": self._solicitudes_recibidas,
            "conversiones_exitosas": self._conversiones_exitosas,
            "conversiones_fallidas": self._conversiones_fallidas,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE CONVERSIÓN")
        print("=" * 60)
        print(f"  Registros recibidos:  {self._solicitudes_recibidas}")
        print(f"  Conversiones OK:      {self._conversiones_exitosas}")
        print(f"  Conversiones fallidas: {self._conversiones_fallidas}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                donde = f"Fila {err['fila']}" if "fila" in err else err["origen"]
                print(f"    - {donde}: {err['error']}")

        print("=" * 60)
