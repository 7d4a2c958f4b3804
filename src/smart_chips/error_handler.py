"""Error handling helpers for the HTTP boundary of the chip engine."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal error while computing chips"


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in chip engine: %s (context=%s)", exc, context or {}, exc_info=True)
        return {
            "option": "error",
            "chips": [],
            "trace": [],
            "error": f"{INTERNAL_ERROR_MESSAGE}: {exc}",
        }
