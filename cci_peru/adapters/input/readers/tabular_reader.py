"""
Adaptador de entrada: Lector de cuentas desde CSV o Excel.

Lee un archivo tabular con pandas y produce una SolicitudConversion por
fila. Dos layouts:

- Codificar: columnas `banco`, `cuenta` y opcionalmente `tipo`.

      banco,cuenta,tipo
      BCP,19205678912345,ahorro
      BBVA,001101230100012345,

- Decodificar: una columna `cci`.

      cci
      00219210567891234533

Todas las columnas se leen como texto (dtype=str): un número de cuenta
leído como int pierde los ceros iniciales ("0011..." → 11...).
"""

from pathlib import Path

import pandas as pd

from cci_peru.domain.exceptions import FormatoInvalidoError, LecturaError
from cci_peru.domain.models.solicitud_conversion import (
    OPERACION_CODIFICAR,
    OPERACION_DECODIFICAR,
    SolicitudConversion,
)
from cci_peru.domain.ports.account_reader import AccountReader

_FORMATO_ESPERADO = "CSV (.csv) o Excel (.xlsx)"


class TabularAccountReader(AccountReader):
    """Lee solicitudes de conversión de archivos CSV y Excel."""

    _EXTENSIONES = (".csv", ".xlsx")

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self._EXTENSIONES

    def read(self, file_path: Path) -> list[SolicitudConversion]:
        """Lee el archivo y devuelve una solicitud por fila con valor.

        Las filas con la celda `cuenta` (o `cci`) vacía se omiten. El
        número de fila se conserva igual, para que los errores apunten
        a la fila real del archivo.

        Raises:
            FormatoInvalidoError: Si el archivo no existe, la extensión no
                                  está soportada o faltan columnas.
            LecturaError: Si pandas no puede leer el archivo.
        """
        if not file_path.is_file():
            raise FormatoInvalidoError(str(file_path), _FORMATO_ESPERADO, "El archivo no existe")
        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                _FORMATO_ESPERADO,
                f"Extensión '{file_path.suffix}' no soportada",
            )

        df = self._leer_dataframe(file_path)
        df.columns = [str(col).strip().lower() for col in df.columns]

        if "cci" in df.columns:
            return self._solicitudes_decodificar(df)

        faltantes = [col for col in ("banco", "cuenta") if col not in df.columns]
        if faltantes:
            raise FormatoInvalidoError(
                str(file_path),
                "columnas 'banco' y 'cuenta' (o una columna 'cci')",
                f"Faltan columnas: {', '.join(faltantes)}",
            )
        return self._solicitudes_codificar(df)

    # =================================================================
    # MÉTODOS PRIVADOS
    # =================================================================

    @staticmethod
    def _leer_dataframe(file_path: Path) -> pd.DataFrame:
        try:
            if file_path.suffix.lower() == ".csv":
                df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
            else:
                df = pd.read_excel(file_path, dtype=str, keep_default_na=False)
        except Exception as e:
            raise LecturaError(str(file_path), str(e))
        return df.fillna("")

    @staticmethod
    def _solicitudes_decodificar(df: pd.DataFrame) -> list[SolicitudConversion]:
        solicitudes = []
        for fila, registro in enumerate(df.to_dict("records"), start=1):
            cci = str(registro["cci"]).strip()
            if not cci:
                continue
            solicitudes.append(
                SolicitudConversion(fila=fila, operacion=OPERACION_DECODIFICAR, valor=cci)
            )
        return solicitudes

    @staticmethod
    def _solicitudes_codificar(df: pd.DataFrame) -> list[SolicitudConversion]:
        tiene_tipo = "tipo" in df.columns
        solicitudes = []
        for fila, registro in enumerate(df.to_dict("records"), start=1):
            cuenta = str(registro["cuenta"]).strip()
            banco = str(registro["banco"]).strip()
            if not cuenta or not banco:
                continue
            solicitudes.append(
                SolicitudConversion(
                    fila=fila,
                    operacion=OPERACION_CODIFICAR,
                    valor=cuenta,
                    banco=banco,
                    tipo_cuenta=str(registro["tipo"]).strip() if tiene_tipo else "",
                )
            )
        return solicitudes
