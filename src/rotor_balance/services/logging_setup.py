# path: src/rotor_balance/services/logging_setup.py
from __future__ import annotations

import logging
import os
import sys
import traceback
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "rotor_balance"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    log_dir: str = "logs",
    log_name: str = "app.log",
    level: int = logging.INFO,
    *,
    console: bool = True,
) -> logging.Logger:
    """
    Logger raíz del paquete: archivo rotativo (2 MB x 3) + consola opcional.

    Llamadas repetidas no agregan handlers; solo actualizan el nivel
    (así `--debug` aplica aunque el logging ya estuviera inicializado).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(level)
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)
    fmt = logging.Formatter(LOG_FORMAT)

    handlers = [RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")]
    if console:
        handlers.append(logging.StreamHandler())
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.info("Logging inicializado (%s). Archivo: %s", logging.getLevelName(level), log_path)
    return logger


def install_excepthook(logger: Optional[logging.Logger] = None) -> None:
    """Excepciones no capturadas: se registran y luego sigue el hook por defecto."""
    lg = logger or logging.getLogger(LOGGER_NAME)

    def _excepthook(exctype, value, tb):
        msg = "".join(traceback.format_exception(exctype, value, tb))
        lg.error("Excepción no capturada:\n%s", msg)
        sys.__excepthook__(exctype, value, tb)

    sys.excepthook = _excepthook
