# ---------------------------------------------------------------------------
# Author  : eSports Hub team
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Centralised logging configuration.

Levels, handlers and formats live in etc/logging.conf.  The config text uses
%(log_file)s as a placeholder for the rotating file handler; it is resolved
to log/app.log under the project root (or $ESPORTS_LOG_DIR) before being
handed to fileConfig.

    from core.logger import logger
"""

import configparser
import logging
import logging.config
import os
from pathlib import Path

# backend/core/logger.py  →  ../../  →  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_LOG_DIR = Path(os.getenv("ESPORTS_LOG_DIR", str(_PROJECT_ROOT / "log")))
_LOG_FILE = _LOG_DIR / "app.log"
_LOGGING_CONF = _PROJECT_ROOT / "etc" / "logging.conf"

_LOG_DIR.mkdir(parents=True, exist_ok=True)


def _configure() -> None:
    raw = _LOGGING_CONF.read_text(encoding="utf-8")
    # fileConfig passes args through eval(); escape backslashes for Windows paths
    raw = raw.replace("%(log_file)s", str(_LOG_FILE).replace("\\", "\\\\"))

    # RawConfigParser: the format strings contain %(asctime)s etc. which the
    # interpolating parser would choke on.
    parser = configparser.RawConfigParser()
    parser.read_string(raw)
    logging.config.fileConfig(parser, disable_existing_loggers=False)


_configure()

logger = logging.getLogger("esports")
