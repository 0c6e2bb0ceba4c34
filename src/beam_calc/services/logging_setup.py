# path: src/beam_calc/services/logging_setup.py
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from beam_calc.services.settings import Settings

LOGGER_NAME = "beam_calc"


def setup_logging(
    log_dir: Optional[str] = None,
    log_name: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Logger raíz del paquete: archivo rotativo + consola.
    Sin argumentos toma los valores de Settings.from_env().
    """
    settings = Settings.from_env()
    log_dir = log_dir or settings.log_dir
    log_name = log_name or settings.log_name
    lvl = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(lvl)

    # Evitar duplicar handlers si se llama más de una vez
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    fh.setLevel(lvl)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler()
    sh.setLevel(lvl)
    sh.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(sh)

    logger.info("Logging inicializado. Archivo: %s", log_path)
    return logger
