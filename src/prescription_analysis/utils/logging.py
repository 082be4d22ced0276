# ============================================================================
# src/prescription_analysis/utils/logging.py
# ============================================================================
"""
Logging configuration for the prescription analysis engine.

Text output:
    2024-03-01 09:30:00 - prescription_analysis.core.pipeline - INFO - [STEP] Evidence fused: 1 diseases

JSON output adds the pipeline stage (`extra={"stage": ...}`) as its own
field so analysis runs can be followed stage by stage.
"""

import logging
import sys
from typing import Optional
from datetime import datetime, timezone
import json

from prescription_analysis.config import LoggingSettings, logging_settings

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure the root logger from LoggingSettings.

    Args:
        settings: Logging settings, module defaults when omitted
    """
    settings = settings or logging_settings
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    if settings.LOG_FORMAT_JSON:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_FILE:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.LOG_FILE))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the pipeline stage when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        stage = getattr(record, 'stage', None)
        if stage:
            log_data['stage'] = stage

        return json.dumps(log_data)
