#!/usr/bin/env python3
"""
Punto de entrada de línea de comandos.

Rol: Traducir flags del operador en configuración y ActionRequest.
Carga el task file, ejecuta la acción y mapea el resultado a exit code.

Depende de: argparse, config, task_loader, ExecuteAction.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .shared.domain_exceptions import DomainError
from .shared.infrastructure_exceptions import ErrorHandler, InfrastructureError
from .shared.logging_utils import setup_logging_config
from .domain.action_selector import select_action
from .use_cases.execute_action import ExecuteAction
from .infrastructure.config import load_config
from .infrastructure.marathon_client import MarathonClient
from .infrastructure.task_loader import load_task

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser de argumentos."""
    parser = argparse.ArgumentParser(
        prog="marathon-deploy",
        description="Despliegue, estado, escalado y rollback de aplicaciones en Marathon",
    )
    parser.add_argument("target", nargs="?", default="", help="Nombre del target (usado en el reporte de estado)")
    parser.add_argument("--rollback", action="store_true", help="Volver a la versión anterior")
    parser.add_argument("--status", action="store_true", help="Mostrar el estado de la aplicación")
    parser.add_argument("--scale", default=None, metavar="N", help="Escalar a N instancias")
    parser.add_argument("--task-file", default=None, help="Task file JSON (por defecto marathon.json)")
    parser.add_argument("--api-version", type=int, default=None, help="Versión de la API de Marathon")
    parser.add_argument("--user", default=None, help="Usuario que despliega")
    parser.add_argument("--image", default=None, help="Imagen a desplegar")
    parser.add_argument("--image-from-file", default=None, help="Archivo con la imagen a desplegar")
    parser.add_argument("--delete-image-file", action="store_true", default=None,
                        help="Borrar el archivo de imagen tras leerlo")
    parser.add_argument("--timeout", type=float, default=None, help="Timeout de los requests en segundos")
    parser.add_argument("--log-level", default=None, help="Nivel de logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Función principal."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            api_version=args.api_version,
            user=args.user,
            task_file=args.task_file,
            image=args.image,
            image_from_file=args.image_from_file,
            delete_image_file=args.delete_image_file,
            timeout=args.timeout,
            log_level=args.log_level,
        )
    except InfrastructureError as e:
        setup_logging_config()
        ErrorHandler.log_error(e, "load_config")
        return 1

    setup_logging_config(config.log_level)

    action = select_action(
        rollback=args.rollback,
        status=args.status,
        scale=args.scale,
        target=args.target,
    )

    try:
        descriptor = load_task(config.options)

        with MarathonClient(timeout=config.client.timeout, verify_ssl=config.client.verify_ssl) as client:
            action_runner = ExecuteAction(client, user=config.options.user, hostname=config.options.hostname)
            outcome = action_runner.execute(descriptor, action)

    except KeyboardInterrupt:
        logger.info("Proceso interrumpido por usuario")
        return 130
    except (DomainError, InfrastructureError) as e:
        ErrorHandler.log_error(e, "marathon-deploy")
        return 1

    logger.debug(json.dumps(outcome.to_dict(), default=str))

    if not outcome.succeeded:
        logger.error(f"{outcome.action.value if outcome.action else 'acción'} falló: {outcome.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
