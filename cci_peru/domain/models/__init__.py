"""
Modelos de dominio del proyecto cci-peru.

Todos los modelos son dataclasses inmutables (frozen=True) o enums que
representan los datos del negocio sin dependencias externas.

Uso:
    from cci_peru.domain.models import BCPAccountType, CCIMetadata, ResultadoConversion
"""

from cci_peru.domain.models.bank_code import (
    BANCOS_CCI,
    BankCode,
    BCPAccountType,
    parse_bcp_account_type,
)
from cci_peru.domain.models.cci_metadata import BCPCCIMetadata, CCIMetadata
from cci_peru.domain.models.resultado_conversion import ResultadoConversion
from cci_peru.domain.models.solicitud_conversion import (
    OPERACION_CODIFICAR,
    OPERACION_DECODIFICAR,
    SolicitudConversion,
)

__all__ = [
    "BANCOS_CCI",
    "BCPAccountType",
    "BCPCCIMetadata",
    "BankCode",
    "CCIMetadata",
    "OPERACION_CODIFICAR",
    "OPERACION_DECODIFICAR",
    "ResultadoConversion",
    "SolicitudConversion",
    "parse_bcp_account_type",
]
