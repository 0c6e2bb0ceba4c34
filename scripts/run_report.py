# path: scripts/run_report.py
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_calc.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    # Mantener también el comportamiento por defecto (útil si hay consola)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

from beam_calc.domain.cases import BeamCase
from beam_calc.engine.validate import ensure_valid
from beam_calc.services.report_pdf import build_report

if __name__ == "__main__":
    out = sys.argv[1] if len(sys.argv) > 1 else None
    case = ensure_valid(BeamCase.default())
    path = build_report(case, out)
    logger.info("Listo: %s", path)
