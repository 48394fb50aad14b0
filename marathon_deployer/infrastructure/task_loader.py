"""
Resolución del task file a un TaskDescriptor.

Rol: Leer el task file, obtener la imagen y sustituir placeholders.
Lee la imagen desde archivo cuando se indica y puede borrarlo después.
Entrega un descriptor listo para el motor de despliegue.

Depende de: PlaceholderResolver, DeployOptions.
"""

import json
import logging
import os

from ..shared.infrastructure_exceptions import TaskFileError
from ..shared.logging_utils import log_operation_start, log_operation_success, log_operation_error
from ..domain.entities import TaskDescriptor
from .config import DeployOptions
from .placeholder_resolver import PlaceholderResolver

logger = logging.getLogger(__name__)


def read_image(options: DeployOptions) -> str:
    """
    Obtiene la imagen a desplegar.

    Si image_from_file está definido, su contenido reemplaza a image
    y, con delete_image_file, el archivo se borra tras leerlo.
    """
    if not options.image_from_file:
        return options.image

    try:
        with open(options.image_from_file, "r") as f:
            image = f.read().strip()
    except OSError as e:
        raise TaskFileError(f"No se pudo leer {options.image_from_file}: {e}") from e

    if options.delete_image_file:
        try:
            os.remove(options.image_from_file)
            logger.info(f"Archivo de imagen borrado: {options.image_from_file}")
        except OSError as e:
            logger.warning(f"No se pudo borrar {options.image_from_file}: {e}")

    return image


def load_task(options: DeployOptions, resolver: PlaceholderResolver = None) -> TaskDescriptor:
    """
    Carga y resuelve el task file indicado en las opciones.

    Args:
        options: Opciones resueltas
        resolver: Resolver de placeholders (opcional)

    Returns:
        TaskDescriptor resuelto

    Raises:
        TaskFileError: Si el archivo no existe o no es JSON válido
    """
    operation = "load_task"
    log_operation_start(logger, operation, task_file=options.task_file)

    resolver = resolver or PlaceholderResolver()
    image = read_image(options)

    try:
        with open(options.task_file, "r") as f:
            template = f.read()
    except OSError as e:
        log_operation_error(logger, operation, e, task_file=options.task_file)
        raise TaskFileError(f"No se pudo leer {options.task_file}: {e}") from e

    text = resolver.resolve_placeholders(template, {
        "image": image,
        "user": options.user,
        "hostname": options.hostname,
    })

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        log_operation_error(logger, operation, e, task_file=options.task_file)
        raise TaskFileError(f"{options.task_file} no es JSON válido: {e}") from e

    if not isinstance(data, dict):
        raise TaskFileError(f"{options.task_file} debe contener un objeto JSON")

    descriptor = TaskDescriptor.from_mapping(data, api_version=options.api_version, image=image)

    log_operation_success(logger, operation, task_file=options.task_file, app_id=descriptor.id)
    return descriptor
