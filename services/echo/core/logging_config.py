from typing import Optional

from services.common.core.logging_config import setup_logging as common_setup_logging

from ..config import config


def setup_logging(config_path: Optional[str] = None):
    """
    Load the YAML config and initialize logging.
    Falls back to basicConfig when the file does not exist.
    """
    common_setup_logging(config_path or config.LOG_CONFIG_PATH)
