"""
Excepciones de dominio del proyecto cci-peru.

Los codificadores (BCP, BBVA) NUNCA lanzan: reportan entradas inválidas
devolviendo None. El decodificador de CCI sí lanza, y estas son las
excepciones que usa. Las de archivo (formato, lectura, salida) son del
procesamiento por lotes.

Jerarquía:
    CCIBaseError
    ├── CCIFormatoInvalidoError   → El CCI no tiene exactamente 20 dígitos
    ├── BancoDesconocidoError     → El prefijo del CCI no es de un banco conocido
    ├── FormatoInvalidoError      → El archivo de entrada no tiene el formato esperado
    ├── LecturaError              → Error al leer el archivo de entrada
    └── OutputError               → Error al generar el archivo de salida
"""


class CCIBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar cualquier error del proyecto con un solo
    `except CCIBaseError` (por ejemplo en el procesador de lotes).
    """


class CCIFormatoInvalidoError(CCIBaseError):
    """Se lanza cuando un CCI no es numérico o no tiene exactamente 20 dígitos.

    Ejemplos:
    - "0021921056789123453" (19 dígitos)
    - "0021921056789123453A" (contiene letras)
    - "002-192-10567891234533" (contiene guiones)
    """

    def __init__(self, cci: str):
        self.cci = cci
        super().__init__(
            f"El CCI debe ser numérico y tener exactamente 20 dígitos: '{cci}'"
        )


class BancoDesconocidoError(CCIBaseError):
    """Se lanza cuando los 3 primeros dígitos del CCI no corresponden a
    ninguno de los bancos soportados."""

    def __init__(self, cci: str, codigo: str):
        self.cci = cci
        self.codigo = codigo
        super().__init__(f"Identificador de banco desconocido: '{codigo}' (CCI '{cci}')")


class FormatoInvalidoError(CCIBaseError):
    """Se lanza cuando un archivo de entrada no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un CSV o Excel pero el archivo es un .pdf.
    - Faltan las columnas 'banco' y 'cuenta' (y tampoco hay 'cci').
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class LecturaError(CCIBaseError):
    """Se lanza cuando pandas no puede leer el archivo de entrada
    (archivo corrupto, codificación inesperada, hoja vacía, etc.)."""

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(CCIBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El archivo está abierto en otro programa.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
