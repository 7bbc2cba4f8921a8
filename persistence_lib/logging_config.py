from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

DEFAULT_CONFIG_PATH = Path('persistence.yml')


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for a host application using persistence_lib.

    Reads `log_level` from the YAML store configuration when present and
    resets the root handlers to that level. Returns this module's logger.
    """
    DEFAULT_LOG_LEVEL = logging.WARNING

    cfg_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if cfg_path.exists():
        try:
            with cfg_path.open('r', encoding='utf-8') as _f:
                _cfg = yaml.safe_load(_f) or {}
                _lvl = _cfg.get('log_level')
                if _lvl:
                    DEFAULT_LOG_LEVEL = getattr(logging, str(_lvl).upper())
        except Exception:
            # If config parse fails, fall back to default level
            DEFAULT_LOG_LEVEL = logging.WARNING

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.info("Log level set to: %s", logging.getLevelName(DEFAULT_LOG_LEVEL))
    return logger
