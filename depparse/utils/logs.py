import sys
from typing import Any, Mapping, Optional
from datetime import datetime
from pathlib import Path
from loguru import logger

from depparse.utils.constants import config

PACKAGE = "depparse"

# Silent as a library; applications opt in with setup_logging() or logger.enable("depparse")
logger.disable(PACKAGE)


def define_log_level(print_level="INFO", logfile_level="DEBUG", name: Optional[str] = None,
                     log_dir: Optional[str] = None):
    """Replace all loguru sinks with a stderr sink and, when ``log_dir`` is set, a dated log file."""
    logger.remove()
    logger.add(sys.stderr, level=print_level)

    if log_dir:
        formatted_date = datetime.now().strftime("%Y%m%d")
        log_name = f"{name}_{formatted_date}" if name else formatted_date
        logger.add(Path(log_dir) / f"{log_name}.txt", level=logfile_level)
    return logger


def setup_logging(cfg: Optional[Mapping[str, Any]] = None, print_level: Optional[str] = None):
    """Configure sinks from the ``logging`` config section and enable this package's messages."""
    log_config = (cfg if cfg is not None else config).get('logging', {})
    define_log_level(
        print_level=print_level or log_config.get('print_level', 'INFO'),
        logfile_level=log_config.get('logfile_level', 'DEBUG'),
        name=PACKAGE,
        log_dir=log_config.get('log_dir'),
    )
    logger.enable(PACKAGE)
    return logger
