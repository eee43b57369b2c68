"""
Punto de entrada CLI: cci-peru.

Uso:
    # Cuenta BCP → CCI (tipo por defecto: ahorro)
    cci-peru bcp 19205678912345 --tipo corriente

    # Cuenta BBVA (18 o 20 dígitos) → CCI
    cci-peru bbva 001101230100012345

    # CCI → banco y cuenta
    cci-peru decode 00219210567891234533

    # Lote desde CSV/Excel → Excel de resultados
    cci-peru batch /ruta/cuentas.csv -o /ruta/salida.xlsx

Este módulo es el ÚNICO lugar donde se ensamblan los componentes del modo
lote (lector, procesador, logger, escritor). No contiene lógica de negocio.
"""

import argparse
import sys
from pathlib import Path

from cci_peru.adapters.input.readers.tabular_reader import TabularAccountReader
from cci_peru.adapters.output.loggers.console_logger import ConsoleLogger
from cci_peru.adapters.output.writers.excel_writer import ExcelWriter
from cci_peru.domain.exceptions import CCIBaseError
from cci_peru.domain.models.bank_code import parse_bcp_account_type
from cci_peru.domain.models.cci_metadata import BCPCCIMetadata
from cci_peru.domain.services.bbva_encoder import convert_bbva_account_number_to_cci
from cci_peru.domain.services.bcp_encoder import convert_bcp_account_number_to_cci
from cci_peru.domain.services.cci_decoder import get_cci_metadata
from cci_peru.domain.services.conversion_processor import ConversionProcessor


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI. Devuelve el código de salida."""
    args = _parse_args(argv)
    return args.handler(args)


def run() -> None:
    """Entry point de consola (pyproject): sale con el código de main()."""
    sys.exit(main())


# =================================================================
# SUBCOMANDOS
# =================================================================


def _cmd_bcp(args: argparse.Namespace) -> int:
    tipo = parse_bcp_account_type(args.tipo)
    if tipo is None:
        print(f"❌ Tipo de cuenta BCP no reconocido: '{args.tipo}'")
        return 1

    cci = convert_bcp_account_number_to_cci(args.cuenta, tipo)
    if cci is None:
        print(f"❌ Cuenta BCP inválida: '{args.cuenta}'. Se esperaban 14 dígitos.")
        return 1

    print(cci)
    return 0


def _cmd_bbva(args: argparse.Namespace) -> int:
    cci = convert_bbva_account_number_to_cci(args.cuenta)
    if cci is None:
        print(f"❌ Cuenta BBVA inválida: '{args.cuenta}'. Se esperaban 18 o 20 dígitos.")
        return 1

    print(cci)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    try:
        metadata = get_cci_metadata(args.cci)
    except CCIBaseError as e:
        print(f"❌ {e}")
        return 1

    print(f"  Banco:   {metadata.bank}")
    print(f"  Cuenta:  {metadata.account_number}")
    print(f"  CCI:     {metadata.cci}")
    if isinstance(metadata, BCPCCIMetadata):
        print(f"  Moneda:  {metadata.currency}")
        print(f"  Tipo:    {metadata.account_type}")
    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    input_path = Path(args.input_path)
    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.parent / f"conversiones_{input_path.stem}.xlsx"

    logger = ConsoleLogger(verbose=not args.quiet)
    reader = TabularAccountReader()
    processor = ConversionProcessor(logger=logger)
    writer = ExcelWriter()

    print("=" * 60)
    print("CONVERSIÓN DE CUENTAS A CCI")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_path}")
    print()

    try:
        solicitudes = reader.read(input_path)
    except CCIBaseError as e:
        logger.log_error(input_path.name, e)
        logger.print_summary()
        return 1

    if not solicitudes:
        print("❌ El archivo no tiene registros para convertir.")
        return 1

    resultados = processor.process_batch(solicitudes, origen=input_path.name)

    try:
        ruta = writer.write(resultados, output_path)
    except CCIBaseError as e:
        logger.log_error(str(output_path), e)
        logger.print_summary()
        return 1

    logger.log_output_written(ruta, len(resultados))
    logger.print_summary()
    return 0 if all(r.exitoso for r in resultados) else 1


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="cci-peru",
        description="Conversión de cuentas bancarias peruanas a CCI y decodificación de CCI",
        epilog="Ejemplo: cci-peru bcp 19205678912345 --tipo ahorro",
    )
    subparsers = parser.add_subparsers(dest="comando", required=True)

    bcp = subparsers.add_parser("bcp", help="Convierte una cuenta BCP de 14 dígitos a CCI")
    bcp.add_argument("cuenta", help="Número de cuenta BCP (14 dígitos)")
    bcp.add_argument(
        "-t",
        "--tipo",
        default="ahorro",
        help="Tipo de cuenta: ahorro, corriente, cts (o 1, 2, 3). Por defecto: ahorro",
    )
    bcp.set_defaults(handler=_cmd_bcp)

    bbva = subparsers.add_parser("bbva", help="Convierte una cuenta BBVA de 18 o 20 dígitos a CCI")
    bbva.add_argument("cuenta", help="Número de cuenta BBVA (18 o 20 dígitos)")
    bbva.set_defaults(handler=_cmd_bbva)

    decode = subparsers.add_parser("decode", help="Obtiene banco y cuenta a partir de un CCI")
    decode.add_argument("cci", help="CCI de 20 dígitos")
    decode.set_defaults(handler=_cmd_decode)

    batch = subparsers.add_parser("batch", help="Convierte un CSV/Excel de cuentas o CCIs")
    batch.add_argument("input_path", help="Ruta al archivo CSV o Excel")
    batch.add_argument(
        "-o",
        "--output",
        help="Archivo Excel de salida. "
        "Si no se especifica, se crea conversiones_<nombre>.xlsx junto a la entrada.",
    )
    batch.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="No imprimir cada conversión exitosa",
    )
    batch.set_defaults(handler=_cmd_batch)

    return parser.parse_args(argv)


if __name__ == "__main__":
    run()
