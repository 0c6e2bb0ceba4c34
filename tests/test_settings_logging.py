import logging
import os

import pytest

from beam_calc.services.logging_setup import LOGGER_NAME, setup_logging
from beam_calc.services.settings import Settings


def test_defaults():
    s = Settings.from_env({})
    assert s == Settings()
    assert s.n_samples == 100
    assert s.gravity == 9.81
    assert s.superpose_cantilever is True


def test_from_env_overrides():
    env = {
        "BEAM_CALC_N_SAMPLES": "200",
        "BEAM_CALC_SUPERPOSE_CANTILEVER": "false",
        "BEAM_CALC_GRAVITY": "9,8",
        "BEAM_CALC_LOG_DIR": "/tmp/beam_logs",
        "BEAM_CALC_CHART_DPI": "  ",
        "OTHER": "x",
    }
    s = Settings.from_env(env)
    assert s.n_samples == 200
    assert s.superpose_cantilever is False
    assert s.gravity == pytest.approx(9.8)
    assert s.log_dir == "/tmp/beam_logs"
    assert s.chart_dpi == 150


def test_from_env_invalid_number():
    with pytest.raises(ValueError) as exc:
        Settings.from_env({"BEAM_CALC_N_SAMPLES": "many"})
    assert "BEAM_CALC_N_SAMPLES" in str(exc.value)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    for h in saved:
        logger.removeHandler(h)
    yield logger
    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)
    for h in saved:
        logger.addHandler(h)


def test_setup_logging_writes_file(tmp_path, clean_logger):
    logger = setup_logging(log_dir=str(tmp_path / "logs"), log_name="test.log", level="debug")
    assert logger is clean_logger
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("beam_calc.engine.analysis").debug("hola")
    for h in logger.handlers:
        h.flush()

    path = tmp_path / "logs" / "test.log"
    assert os.path.exists(path)
    text = path.read_text(encoding="utf-8")
    assert "Logging inicializado" in text
    assert "hola" in text


def test_setup_logging_is_idempotent(tmp_path, clean_logger):
    setup_logging(log_dir=str(tmp_path), log_name="a.log")
    setup_logging(log_dir=str(tmp_path), log_name="a.log")
    assert len(clean_logger.handlers) == 2
