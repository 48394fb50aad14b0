"""
Selección de la acción del operador.

Rol: Traducir los flags del operador a exactamente una ActionRequest.
Prioridad fija: rollback > status > scale > deploy.
Scale solo se elige cuando su valor es un entero válido.
"""

import logging
from typing import Any, Optional

from ..shared.validation_utils import parse_integer
from .entities import ActionRequest, Deploy, Rollback, Scale, Status

logger = logging.getLogger(__name__)


def select_action(
    rollback: bool = False,
    status: bool = False,
    scale: Optional[Any] = None,
    target: str = "",
) -> ActionRequest:
    """
    Elige la acción a ejecutar.

    Args:
        rollback: Se pidió volver a la versión anterior
        status: Se pidió el estado de la aplicación
        scale: Valor crudo del flag de escalado (None si no se pasó)
        target: Nombre del target, usado al reportar el estado

    Returns:
        ActionRequest elegida
    """
    if rollback:
        return Rollback()

    if status:
        return Status(target=target)

    if scale is not None:
        count = parse_integer(scale)
        if count is not None:
            return Scale(count=count)
        logger.debug(f"Valor de scale ignorado, no es entero: {scale!r}")

    return Deploy()
