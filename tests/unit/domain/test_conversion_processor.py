"""
Tests para ConversionProcessor.

Usan un logger en memoria para verificar qué eventos se registran, sin
imprimir a consola.
"""

from pathlib import Path

import pytest

from cci_peru.domain.models.solicitud_conversion import SolicitudConversion
from cci_peru.domain.ports.process_logger import ProcessLogger
from cci_peru.domain.services.conversion_processor import ConversionProcessor


class MemoryLogger(ProcessLogger):
    """ProcessLogger que acumula eventos en listas."""

    def __init__(self) -> None:
        self.lotes: list[tuple[str, int]] = []
        self.exitosas: list[tuple[int, str, str]] = []
        self.fallidas: list[tuple[int, str]] = []
        self.errores: list[tuple[str, Exception]] = []
        self.salidas: list[Path] = []

    def log_batch_received(self, origen: str, num_solicitudes: int) -> None:
        self.lotes.append((origen, num_solicitudes))

    def log_conversion_ok(self, fila: int, banco: str, cci: str) -> None:
        self.exitosas.append((fila, banco, cci))

    def log_conversion_failed(self, fila: int, motivo: str) -> None:
        self.fallidas.append((fila, motivo))

    def log_error(self, origen: str, error: Exception) -> None:
        self.errores.append((origen, error))

    def log_output_written(self, output_path: Path, num_resultados: int) -> None:
        self.salidas.append(output_path)

    def get_summary(self) -> dict:
        return {
            "solicitudes_recibidas": sum(n for _, n in self.lotes),
            "conversiones_exitosas": len(self.exitosas),
            "conversiones_fallidas": len(self.fallidas),
            "errores": [],
        }


def _codificar(fila: int, banco: str, cuenta: str, tipo: str = "") -> SolicitudConversion:
    return SolicitudConversion(
        fila=fila, operacion="codificar", valor=cuenta, banco=banco, tipo_cuenta=tipo
    )


def _decodificar(fila: int, cci: str) -> SolicitudConversion:
    return SolicitudConversion(fila=fila, operacion="decodificar", valor=cci)


class TestCodificar:
    """Solicitudes cuenta → CCI."""

    @pytest.fixture
    def logger(self):
        return MemoryLogger()

    @pytest.fixture
    def processor(self, logger):
        return ConversionProcessor(logger=logger)

    def test_bcp_tipo_por_defecto_es_ahorro(self, processor, logger):
        res = processor.process_request(_codificar(1, "BCP", "19205678912345"))
        assert res.exitoso
        assert res.cci == "00219210567891234533"
        assert res.banco == "BCP"
        assert res.cuenta == "19205678912345"
        assert logger.exitosas == [(1, "BCP", "00219210567891234533")]

    def test_bcp_con_tipo_textual(self, processor):
        res = processor.process_request(_codificar(1, "bcp", "19205678912345", "Corriente"))
        assert res.cci == "00219220567891234532"

    def test_bcp_tipo_invalido(self, processor, logger):
        res = processor.process_request(_codificar(4, "BCP", "19205678912345", "plazo"))
        assert not res.exitoso
        assert "Tipo de cuenta BCP no reconocido" in res.error
        assert logger.fallidas[0][0] == 4

    def test_bbva(self, processor):
        res = processor.process_request(_codificar(1, " BBVA ", "001101230100012345"))
        assert res.cci == "01112300010001234573"
        assert res.banco == "BBVA"

    def test_cuenta_invalida_no_lanza(self, processor, logger):
        res = processor.process_request(_codificar(2, "BCP", "123"))
        assert not res.exitoso
        assert res.cci == ""
        assert "14 dígitos" in res.error
        assert logger.fallidas == [(2, res.error)]

    def test_bbva_cuenta_invalida(self, processor):
        res = processor.process_request(_codificar(2, "BBVA", "0011"))
        assert "18 o 20 dígitos" in res.error

    def test_banco_sin_codificador(self, processor):
        res = processor.process_request(_codificar(3, "INTERBANK", "1234567890123"))
        assert not res.exitoso
        assert "No hay conversión" in res.error
        assert "BBVA, BCP" in res.error


class TestDecodificar:
    """Solicitudes CCI → cuenta."""

    @pytest.fixture
    def logger(self):
        return MemoryLogger()

    @pytest.fixture
    def processor(self, logger):
        return ConversionProcessor(logger=logger)

    def test_bcp_incluye_moneda_y_tipo(self, processor):
        res = processor.process_request(_decodificar(1, "00219210567891234533"))
        assert res.exitoso
        assert res.banco == "BCP"
        assert res.cuenta == "19205678912345"
        assert res.moneda == "USD"
        assert res.tipo == "Ahorro"

    def test_otro_banco_sin_moneda_ni_tipo(self, processor):
        res = processor.process_request(_decodificar(1, "01800000401234567812"))
        assert res.banco == "BANCO DE LA NACION"
        assert res.cuenta == "04012345678"
        assert res.moneda == ""
        assert res.tipo == ""

    def test_formato_invalido_se_convierte_en_error(self, processor, logger):
        res = processor.process_request(_decodificar(5, "123"))
        assert not res.exitoso
        assert "20 dígitos" in res.error
        assert res.cci == "123"
        assert logger.fallidas[0][0] == 5

    def test_banco_desconocido_se_convierte_en_error(self, processor):
        res = processor.process_request(_decodificar(1, "99912345678901234567"))
        assert "desconocido" in res.error
        assert res.banco == ""

    def test_espacios_alrededor_se_ignoran(self, processor):
        res = processor.process_request(_decodificar(1, "  00219210567891234533 "))
        assert res.exitoso


class TestProcessBatch:
    """Lotes completos."""

    def test_un_resultado_por_solicitud_en_orden(self):
        logger = MemoryLogger()
        processor = ConversionProcessor(logger=logger)
        solicitudes = [
            _codificar(1, "BCP", "19205678912345"),
            _codificar(2, "BCP", "malo"),
            _decodificar(3, "01112300010001234573"),
        ]

        resultados = processor.process_batch(solicitudes, origen="cuentas.csv")

        assert [r.fila for r in resultados] == [1, 2, 3]
        assert [r.exitoso for r in resultados] == [True, False, True]
        assert logger.lotes == [("cuentas.csv", 3)]
        assert len(logger.exitosas) == 2
        assert len(logger.fallidas) == 1

    def test_lote_vacio(self):
        logger = MemoryLogger()
        assert ConversionProcessor(logger=logger).process_batch([]) == []
        assert logger.lotes == [("lote", 0)]
