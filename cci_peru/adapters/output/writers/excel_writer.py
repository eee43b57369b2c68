"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con 2 hojas:
- Hoja 1 (Resumen): registros, exitosos y con error por banco, más un TOTAL.
- Hoja 2 (Conversiones): una fila por solicitud con 8 columnas.
"""

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from cci_peru.domain.exceptions import OutputError
from cci_peru.domain.models.resultado_conversion import ResultadoConversion
from cci_peru.domain.ports.output_writer import OutputWriter

COLUMNAS_CONVERSIONES = ["Fila", "Operación", "Banco", "Cuenta", "CCI", "Moneda", "Tipo", "Error"]

_SIN_BANCO = "SIN IDENTIFICAR"


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write(self, resultados: Sequence[ResultadoConversion], output_path: Path) -> Path:
        """Escribe los resultados de un lote a Excel.

        Args:
            resultados: Resultados de la conversión.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión (salida.v2 → salida.v2.xlsx).

        Returns:
            Ruta del archivo creado.

        Raises:
            OutputError: Si no hay resultados, o si no se puede crear el
                         directorio o escribir el archivo.
        """
        if not resultados:
            raise OutputError(str(output_path), "No hay resultados para escribir")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_name(output_path.name + ".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(resultados, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _construir_conversiones(resultados: Sequence[ResultadoConversion]) -> pd.DataFrame:
        filas = [
            {
                "Fila": r.fila,
                "Operación": r.operacion,
                "Banco": r.banco,
                "Cuenta": r.cuenta,
                "CCI": r.cci,
                "Moneda": r.moneda,
                "Tipo": r.tipo,
                "Error": r.error,
            }
            for r in resultados
        ]
        return pd.DataFrame(filas, columns=COLUMNAS_CONVERSIONES)

    @staticmethod
    def _construir_resumen(df_conversiones: pd.DataFrame) -> pd.DataFrame:
        """Agrupa por banco. Los resultados sin banco (CCI ilegible o de
        prefijo desconocido) se agrupan como SIN IDENTIFICAR."""
        df_resumen = (
            df_conversiones.assign(
                Banco=df_conversiones["Banco"].replace("", _SIN_BANCO),
                Exitoso=df_conversiones["Error"].eq(""),
            )
            .groupby("Banco", sort=True)
            .agg(Registros=("Fila", "count"), Exitosos=("Exitoso", "sum"))
            .reset_index()
        )
        df_resumen["Exitosos"] = df_resumen["Exitosos"].astype(int)
        df_resumen["Con error"] = df_resumen["Registros"] - df_resumen["Exitosos"]

        total = pd.DataFrame(
            [
                {
                    "Banco": "TOTAL",
                    "Registros": int(df_resumen["Registros"].sum()),
                    "Exitosos": int(df_resumen["Exitosos"].sum()),
                    "Con error": int(df_resumen["Con error"].sum()),
                }
            ]
        )
        return pd.concat([df_resumen, total], ignore_index=True)

    def _escribir_excel(self, resultados: Sequence[ResultadoConversion], output_path: Path) -> None:
        df_conversiones = self._construir_conversiones(resultados)
        df_resumen = self._construir_resumen(df_conversiones)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_conversiones.to_excel(writer, index=False, sheet_name="Conversiones")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_conversiones = writer.sheets["Conversiones"]

            # Texto para conservar ceros iniciales en cuenta y CCI
            text_format = workbook.add_format({"num_format": "@"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 22)  # Banco
            ws_resumen.set_column("B:D", 12)  # Registros / Exitosos / Con error

            # --- Formato Hoja Conversiones ---
            ws_conversiones.set_column("A:A", 6)  # Fila
            ws_conversiones.set_column("B:B", 12)  # Operación
            ws_conversiones.set_column("C:C", 22)  # Banco
            ws_conversiones.set_column("D:D", 22, text_format)  # Cuenta
            ws_conversiones.set_column("E:E", 22, text_format)  # CCI
            ws_conversiones.set_column("F:F", 8)  # Moneda
            ws_conversiones.set_column("G:G", 10)  # Tipo
            ws_conversiones.set_column("H:H", 60)  # Error
