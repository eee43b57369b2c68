"""
Tests para la CLI cci-peru.

Se llama a main() con argv explícito y se revisa el código de salida y lo
impreso en consola.
"""

import pandas as pd
import pytest

from cci_peru.cli.main import main


class TestComandosSimples:
    """Subcomandos bcp, bbva y decode."""

    def test_bcp_por_defecto_ahorro(self, capsys):
        assert main(["bcp", "19205678912345"]) == 0
        assert capsys.readouterr().out.strip() == "00219210567891234533"

    @pytest.mark.parametrize(
        "tipo, expected",
        [("corriente", "00219220567891234532"), ("3", "00219230567891234531")],
    )
    def test_bcp_con_tipo(self, capsys, tipo, expected):
        assert main(["bcp", "19205678912345", "--tipo", tipo]) == 0
        assert capsys.readouterr().out.strip() == expected

    def test_bcp_tipo_invalido(self, capsys):
        assert main(["bcp", "19205678912345", "-t", "plazo"]) == 1
        assert "no reconocido" in capsys.readouterr().out

    def test_bcp_cuenta_invalida(self, capsys):
        assert main(["bcp", "123"]) == 1
        assert "14 dígitos" in capsys.readouterr().out

    def test_bbva(self, capsys):
        assert main(["bbva", "001101230100012345"]) == 0
        assert capsys.readouterr().out.strip() == "01112300010001234573"

    def test_bbva_cuenta_invalida(self, capsys):
        assert main(["bbva", "0011"]) == 1

    def test_decode_bcp(self, capsys):
        assert main(["decode", "00219210567891234533"]) == 0
        salida = capsys.readouterr().out
        assert "BCP" in salida
        assert "19205678912345" in salida
        assert "Ahorro" in salida
        assert "USD" in salida

    def test_decode_otro_banco(self, capsys):
        assert main(["decode", "01800000401234567812"]) == 0
        salida = capsys.readouterr().out
        assert "BANCO DE LA NACION" in salida
        assert "Moneda" not in salida

    def test_decode_invalido(self, capsys):
        assert main(["decode", "99912345678901234567"]) == 1
        assert "desconocido" in capsys.readouterr().out

    def test_sin_subcomando_sale_con_error(self):
        with pytest.raises(SystemExit):
            main([])


class TestBatch:
    """Subcomando batch."""

    def test_genera_excel_por_defecto_junto_a_la_entrada(self, tmp_path, capsys):
        entrada = tmp_path / "cuentas.csv"
        entrada.write_text(
            "banco,cuenta,tipo\nBCP,19205678912345,ahorro\nBBVA,001101230100012345,\n",
            encoding="utf-8",
        )

        assert main(["batch", str(entrada)]) == 0

        salida = tmp_path / "conversiones_cuentas.xlsx"
        df = pd.read_excel(salida, sheet_name="Conversiones", dtype=str)
        assert list(df["CCI"]) == ["00219210567891234533", "01112300010001234573"]
        assert "RESUMEN DE CONVERSIÓN" in capsys.readouterr().out

    def test_con_errores_sale_con_1_pero_escribe_excel(self, tmp_path):
        entrada = tmp_path / "ccis.csv"
        entrada.write_text("cci\n00219210567891234533\n123\n", encoding="utf-8")
        salida = tmp_path / "out" / "resultado.xlsx"

        assert main(["batch", str(entrada), "-o", str(salida), "--quiet"]) == 1
        assert salida.exists()

    def test_salida_no_escribible_sale_con_1(self, tmp_path, capsys):
        entrada = tmp_path / "ccis.csv"
        entrada.write_text("cci\n00219210567891234533\n", encoding="utf-8")
        bloqueo = tmp_path / "ocupado"
        bloqueo.write_text("", encoding="utf-8")

        assert main(["batch", str(entrada), "-o", str(bloqueo / "resultado.xlsx")]) == 1
        assert "Error generando salida" in capsys.readouterr().out

    def test_archivo_inexistente(self, tmp_path, capsys):
        assert main(["batch", str(tmp_path / "no_existe.csv")]) == 1
        assert "no existe" in capsys.readouterr().out

    def test_archivo_sin_registros(self, tmp_path, capsys):
        entrada = tmp_path / "vacio.csv"
        entrada.write_text("banco,cuenta\n", encoding="utf-8")

        assert main(["batch", str(entrada)]) == 1
        assert "no tiene registros" in capsys.readouterr().out
