"""
Tests para cci_peru.domain.shared.check_digit

Los valores esperados se calcularon a mano. Traza de "002192" (BCP):

    índice:   0  1  2  3  4  5
    dígito:   0  0  2  1  9  2
    peso:     1  2  1  2  1  2
    producto: 0  0  2  2  9  4   → suma 17 → (10 - 7) % 10 = 3
"""

import pytest

from cci_peru.domain.shared.check_digit import (
    BBVA_ACCOUNT_WEIGHTS,
    BBVA_BANK_BRANCH_WEIGHTS,
    bcp_check_digit,
    weighted_check_digit,
)


class TestBcpCheckDigit:
    """Pruebas para el dígito de control BCP (suma de dígitos del producto)."""

    def test_grupo1_traza_manual(self):
        assert bcp_check_digit("002192") == 3

    def test_grupo2_con_productos_de_dos_cifras(self):
        """'105678912345': 6*2=12→3, 8*2=16→7, 5*2=10→1. Suma 47 → 3."""
        assert bcp_check_digit("105678912345") == 3

    @pytest.mark.parametrize(
        "group, expected",
        [
            ("205678912345", 2),  # Corriente: suma 48
            ("305678912345", 1),  # CTS: suma 49
            ("000000", 0),  # suma 0 → (10 - 0) % 10 = 0, no 10
            ("99", 2),  # 9 + (18 → 9) = 18
        ],
    )
    def test_casos_conocidos(self, group, expected):
        assert bcp_check_digit(group) == expected

    def test_siempre_un_digito(self):
        for group in ("0", "5", "19", "123456789012", "999999999999"):
            assert 0 <= bcp_check_digit(group) <= 9

    @pytest.mark.parametrize("group", ["", "12a4", "12 34", "١٢٣"])
    def test_entrada_no_numerica_lanza_error(self, group):
        with pytest.raises(ValueError, match="solo dígitos"):
            bcp_check_digit(group)


class TestWeightedCheckDigit:
    """Pruebas para el dígito ponderado de BBVA (producto // 10 + producto % 10)."""

    def test_entidad_oficina_traza_manual(self):
        """'00110123' con pesos 0,1,2,1,0,2,1,2 → 0+0+2+1+0+2+2+6 = 13 → 7."""
        assert weighted_check_digit("00110123", BBVA_BANK_BRANCH_WEIGHTS) == 7

    def test_control_cuenta_traza_manual(self):
        """'0100012345' con pesos 1,2,... → 5*2=10→1. Suma 17 → 3."""
        assert weighted_check_digit("0100012345", BBVA_ACCOUNT_WEIGHTS) == 3

    @pytest.mark.parametrize(
        "digits, weights, expected",
        [
            ("00110814", BBVA_BANK_BRANCH_WEIGHTS, 1),
            ("0200123456", BBVA_ACCOUNT_WEIGHTS, 2),
            ("99999999", BBVA_BANK_BRANCH_WEIGHTS, 6),
            ("00000000", BBVA_BANK_BRANCH_WEIGHTS, 0),
        ],
    )
    def test_casos_conocidos(self, digits, weights, expected):
        assert weighted_check_digit(digits, weights) == expected

    def test_peso_cero_ignora_el_digito(self):
        """Las posiciones 0 y 4 de entidad+oficina tienen peso 0."""
        assert weighted_check_digit("90119123", BBVA_BANK_BRANCH_WEIGHTS) == weighted_check_digit(
            "00110123", BBVA_BANK_BRANCH_WEIGHTS
        )

    def test_longitud_distinta_a_pesos_lanza_error(self):
        with pytest.raises(ValueError, match="Se esperaban 8 dígitos"):
            weighted_check_digit("0011012", BBVA_BANK_BRANCH_WEIGHTS)

    def test_entrada_no_numerica_lanza_error(self):
        with pytest.raises(ValueError, match="solo dígitos"):
            weighted_check_digit("0011012X", BBVA_BANK_BRANCH_WEIGHTS)


class TestEquivalenciaReducciones:
    """Con pesos 1 y 2 los productos no pasan de 18 y ambas reducciones
    coinciden. Si estos tests fallan tras cambiar una tabla de pesos,
    las dos reglas ya no son intercambiables."""

    @pytest.mark.parametrize(
        "group",
        ["002192", "105678912345", "999999999999", "123456789012", "000000000001"],
    )
    def test_bcp_igual_a_ponderado_alternado(self, group):
        pesos = tuple(1 if i % 2 == 0 else 2 for i in range(len(group)))
        assert bcp_check_digit(group) == weighted_check_digit(group, pesos)
