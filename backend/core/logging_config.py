"""
Logging setup for processes that embed the forms core.
"""

import logging
from typing import Optional

from core.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from application settings"""
    settings = settings or get_settings()

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
        handlers=handlers,
        force=True,
    )

    logging.getLogger(__name__).debug(
        f"Logging configured at {settings.log_level} for {settings.environment}"
    )
