"""
Servicio de dominio: Procesador de conversiones por lotes.

Orquesta la conversión de muchas filas:
1. Recibe SolicitudConversion (ya leídas por un AccountReader).
2. Codifica (cuenta → CCI) o decodifica (CCI → cuenta) cada una.
3. Registra cada resultado en la bitácora.
4. Devuelve un ResultadoConversion por solicitud, en el mismo orden.

Aquí se unifican las dos políticas de error del núcleo: el None de los
codificadores y las excepciones del decodificador se convierten en un
ResultadoConversion con `error`. Una fila mala no detiene el lote.
"""

from collections.abc import Sequence

from cci_peru.domain.exceptions import CCIBaseError
from cci_peru.domain.models.bank_code import BCPAccountType, parse_bcp_account_type
from cci_peru.domain.models.cci_metadata import BCPCCIMetadata
from cci_peru.domain.models.resultado_conversion import ResultadoConversion
from cci_peru.domain.models.solicitud_conversion import (
    OPERACION_CODIFICAR,
    SolicitudConversion,
)
from cci_peru.domain.ports.process_logger import ProcessLogger
from cci_peru.domain.services.bbva_encoder import convert_bbva_account_number_to_cci
from cci_peru.domain.services.bcp_encoder import convert_bcp_account_number_to_cci
from cci_peru.domain.services.cci_decoder import get_cci_metadata

# Bancos con codificador de cuenta → CCI y el largo de cuenta que aceptan.
_CODIFICADORES = {
    "BCP": "14 dígitos",
    "BBVA": "18 o 20 dígitos",
}


class ConversionProcessor:
    """Convierte solicitudes en resultados.

    Recibe el logger por constructor (Dependency Injection). No sabe si
    imprime a consola o acumula en memoria.
    """

    def __init__(self, logger: ProcessLogger) -> None:
        self._logger = logger

    def process_batch(
        self, solicitudes: Sequence[SolicitudConversion], origen: str = "lote"
    ) -> list[ResultadoConversion]:
        """Procesa todas las solicitudes en orden.

        Args:
            solicitudes: Filas a convertir.
            origen: Nombre del origen para la bitácora (ej: nombre del archivo).

        Returns:
            Un ResultadoConversion por solicitud, exitoso o con error.
        """
        self._logger.log_batch_received(origen, len(solicitudes))
        return [self.process_request(solicitud) for solicitud in solicitudes]

    def process_request(self, solicitud: SolicitudConversion) -> ResultadoConversion:
        """Procesa una sola solicitud. Nunca lanza por datos inválidos."""
        if solicitud.operacion == OPERACION_CODIFICAR:
            resultado = self._encode(solicitud)
        else:
            resultado = self._decode(solicitud)

        if resultado.exitoso:
            self._logger.log_conversion_ok(resultado.fila, resultado.banco, resultado.cci)
        else:
            self._logger.log_conversion_failed(resultado.fila, resultado.error)
        return resultado

    def _encode(self, solicitud: SolicitudConversion) -> ResultadoConversion:
        banco = solicitud.banco.strip().upper()
        cuenta = solicitud.valor.strip()

        def fallo(motivo: str) -> ResultadoConversion:
            return ResultadoConversion(
                fila=solicitud.fila,
                operacion=solicitud.operacion,
                banco=banco,
                cuenta=cuenta,
                error=motivo,
            )

        if banco not in _CODIFICADORES:
            return fallo(
                f"No hay conversión de cuenta a CCI para '{banco}'. "
                f"Bancos disponibles: {', '.join(sorted(_CODIFICADORES))}"
            )

        if banco == "BCP":
            tipo = (
                parse_bcp_account_type(solicitud.tipo_cuenta)
                if solicitud.tipo_cuenta.strip()
                else BCPAccountType.SAVINGS
            )
            if tipo is None:
                return fallo(f"Tipo de cuenta BCP no reconocido: '{solicitud.tipo_cuenta}'")
            cci = convert_bcp_account_number_to_cci(cuenta, tipo)
        else:
            cci = convert_bbva_account_number_to_cci(cuenta)

        if cci is None:
            return fallo(f"Cuenta {banco} inválida: se esperaban {_CODIFICADORES[banco]}")

        return ResultadoConversion(
            fila=solicitud.fila,
            operacion=solicitud.operacion,
            banco=banco,
            cuenta=cuenta,
            cci=cci,
        )

    def _decode(self, solicitud: SolicitudConversion) -> ResultadoConversion:
        cci = solicitud.valor.strip()
        try:
            metadata = get_cci_metadata(cci)
        except CCIBaseError as e:
            return ResultadoConversion(
                fila=solicitud.fila,
                operacion=solicitud.operacion,
                cci=cci,
                error=str(e),
            )

        if isinstance(metadata, BCPCCIMetadata):
            return ResultadoConversion(
                fila=solicitud.fila,
                operacion=solicitud.operacion,
                banco=metadata.bank,
                cuenta=metadata.account_number,
                cci=metadata.cci,
                moneda=metadata.currency,
                tipo=metadata.account_type,
            )

        return ResultadoConversion(
            fila=solicitud.fila,
            operacion=solicitud.operacion,
            banco=metadata.bank,
            cuenta=metadata.account_number,
            cci=metadata.cci,
        )
