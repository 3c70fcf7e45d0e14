"""Logging configuration for the Items API"""
import logging
import sys

from core.config import Settings


def setup_logging(settings: Settings):
    """Configure application-wide logging for the given settings"""
    log_level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(log_level)
