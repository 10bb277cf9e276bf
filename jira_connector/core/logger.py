import logging
import os
from typing import Dict, Mapping
from dotenv import load_dotenv

# charge immédiatement le .env
load_dotenv()

SENSITIVE_HEADERS = {"authorization", "cookie", "proxy-authorization"}


def get_logger(name: str) -> logging.Logger:
    """Configure un logger standardisé avec un niveau selon l'environnement"""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(log_level)

        logger.debug(f"Logger initialized for '{name}' with level={log_level}")
    return logger


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copie des headers où les valeurs d'authentification sont masquées (pour les logs)."""
    return {
        key: ("***" if key.lower() in SENSITIVE_HEADERS else value)
        for key, value in headers.items()
    }
