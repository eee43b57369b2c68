"""
cci-peru: conversión de cuentas bancarias peruanas al Código de Cuenta
Interbancario (CCI) y decodificación de CCIs.

Uso:
    from cci_peru import (
        BCPAccountType,
        convert_bcp_account_number_to_cci,
        convert_bbva_account_number_to_cci,
        get_cci_metadata,
    )

    convert_bcp_account_number_to_cci("19205678912345", BCPAccountType.SAVINGS)
    get_cci_metadata("00219210567891234533")
"""

from cci_peru.domain.exceptions import (
    BancoDesconocidoError,
    CCIBaseError,
    CCIFormatoInvalidoError,
)
from cci_peru.domain.models.bank_code import BANCOS_CCI, BankCode, BCPAccountType
from cci_peru.domain.models.cci_metadata import BCPCCIMetadata, CCIMetadata
from cci_peru.domain.services.bank_identifier import get_bank_from_cci
from cci_peru.domain.services.bbva_encoder import convert_bbva_account_number_to_cci
from cci_peru.domain.services.bcp_encoder import convert_bcp_account_number_to_cci
from cci_peru.domain.services.cci_decoder import get_cci_metadata

__all__ = [
    "BANCOS_CCI",
    "BancoDesconocidoError",
    "BankCode",
    "BCPAccountType",
    "BCPCCIMetadata",
    "CCIBaseError",
    "CCIFormatoInvalidoError",
    "CCIMetadata",
    "convert_bbva_account_number_to_cci",
    "convert_bcp_account_number_to_cci",
    "get_bank_from_cci",
    "get_cci_metadata",
]
