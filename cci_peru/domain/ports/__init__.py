"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from cci_peru.domain.ports import AccountReader, OutputWriter, ProcessLogger
"""

from cci_peru.domain.ports.account_reader import AccountReader
from cci_peru.domain.ports.output_writer import OutputWriter
from cci_peru.domain.ports.process_logger import ProcessLogger

__all__ = [
    "AccountReader",
    "OutputWriter",
    "ProcessLogger",
]
