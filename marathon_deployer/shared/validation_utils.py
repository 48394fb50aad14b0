"""
Utilitarios de validación reutilizables.

Rol: Proveer funciones de validación y parseo comunes.
Validar endpoint, id de aplicación, versión de API y conteos.
Funciones puras sin dependencias externas.

Depende de: expresiones regulares, tipos de datos.
"""

import math
import re
from typing import Any, Optional

INTEGER_PATTERN = r"^[+-]?\d+$"


def validate_endpoint(endpoint: Optional[str]) -> str:
    """
    Valida el endpoint de Marathon.

    Args:
        endpoint: URL base de Marathon

    Returns:
        Endpoint validado (sin modificar)

    Raises:
        ValueError: Si el endpoint está vacío
    """
    if not endpoint or not str(endpoint).strip():
        raise ValueError("endpoint no puede estar vacío")

    return endpoint


def validate_app_id(app_id: Optional[str]) -> str:
    """
    Valida el id de la aplicación.

    El id se usa tal cual en la URL, incluida la barra inicial.
    """
    if not app_id or not str(app_id).strip():
        raise ValueError("id no puede estar vacío")

    return app_id


def validate_api_version(api_version: Any) -> int:
    """
    Valida versión de la API de Marathon.

    Args:
        api_version: Versión como entero o texto

    Returns:
        Versión validada
    """
    version = parse_integer(api_version)

    if version is None or version < 1:
        raise ValueError("apiVersion debe ser un entero positivo")

    return version


def parse_integer(value: Any) -> Optional[int]:
    """
    Parsea un entero estricto.

    Acepta int o texto con dígitos (con signo opcional).
    Booleanos, floats y texto no numérico retornan None.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, str) and re.match(INTEGER_PATTERN, value.strip()):
        return int(value.strip())

    return None


def coerce_count(value: Any) -> int:
    """
    Convierte un contador de la respuesta de Marathon a entero.

    Valores ausentes, no numéricos o no finitos retornan 0.
    """
    if value is None or isinstance(value, bool):
        return 0

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0

    parsed = parse_integer(value)
    return parsed if parsed is not None else 0


def safe_percent(numerator: Any, denominator: Any) -> int:
    """
    Calcula numerator / denominator * 100 redondeado.

    Retorna 0 cuando el denominador es 0 o el resultado no es finito.
    El redondeo es hacia arriba en .5, igual que Math.round.
    """
    try:
        ratio = float(numerator) / float(denominator) * 100
    except (TypeError, ValueError, ZeroDivisionError, OverflowError):
        return 0

    if not math.isfinite(ratio):
        return 0

    return int(math.floor(ratio + 0.5))
