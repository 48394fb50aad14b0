import datetime
import logging
import re
import time
from typing import Any, Dict

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = r"\{[A-Za-z_]+\}"


class PlaceholderResolver:
    """
    Resuelve placeholders simples en el texto del task file.

    Soporta:
    - Despliegue: image, user, hostname
    - Tiempo: timestamp, timestamp_iso, timestamp_date

    Los placeholders desconocidos se dejan intactos para no romper
    el JSON (por ejemplo, llaves literales dentro de strings).
    """

    def resolve_placeholders(self, template: str, context: Dict[str, Any]) -> str:
        """
        Resuelve los placeholders conocidos en una plantilla.

        Args:
            template: Texto del task file
            context: Valores de image, user y hostname

        Returns:
            Texto con placeholders resueltos
        """
        substitutions = self._build_substitutions(context)

        result = template
        for placeholder, value in substitutions.items():
            result = result.replace(placeholder, str(value))

        unresolved = self.find_unresolved(result)
        if unresolved:
            logger.debug(f"Placeholders sin resolver: {unresolved}")

        return result

    def _build_substitutions(self, context: Dict[str, Any]) -> Dict[str, str]:
        now = datetime.datetime.now(datetime.timezone.utc)

        return {
            "{image}": context.get("image", ""),
            "{user}": context.get("user", ""),
            "{hostname}": context.get("hostname", ""),
            "{timestamp}": str(int(time.time())),
            "{timestamp_iso}": now.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "{timestamp_date}": now.strftime("%Y-%m-%d"),
        }

    def get_available_placeholders(self) -> Dict[str, str]:
        """Placeholders disponibles con descripción."""
        return {
            "{image}": "Imagen a desplegar (--image o --image-from-file)",
            "{user}": "Usuario que despliega",
            "{hostname}": "Hostname desde el que se despliega",
            "{timestamp}": "Timestamp Unix actual",
            "{timestamp_iso}": "Timestamp ISO 8601 (ej: 2024-02-03T18:30:34Z)",
            "{timestamp_date}": "Fecha actual YYYY-MM-DD",
        }

    def find_unresolved(self, text: str) -> list:
        """Placeholders con forma válida que no se reconocen."""
        available = self.get_available_placeholders()
        return [p for p in re.findall(PLACEHOLDER_PATTERN, text) if p not in available]
