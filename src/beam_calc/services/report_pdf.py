# path: src/beam_calc/services/report_pdf.py
from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from beam_calc.domain.cases import BeamCase
from beam_calc.domain.loads import UniformLoad
from beam_calc.domain.results import AnalysisResult
from beam_calc.engine.analysis import analyze_case
from beam_calc.sections.shapes import CChannel, Circular, IBeam, Rectangular
from beam_calc.services.chart_export import export_charts
from beam_calc.services.settings import Settings

logger = logging.getLogger(__name__)

# Nota: este módulo no dibuja. Recibe paths a PNG ya generados
# (beam, shear, moment) y el resultado ya calculado por el motor.


@dataclass(frozen=True)
class ReportHeader:
    title: str = "Beam Analysis Report"
    subtitle: str = "Enhanced Load Calculator"
    author: str = ""
    date: Optional[datetime] = None


def export_report_pdf(
    out_pdf_path: str,
    case: BeamCase,
    result: AnalysisResult,
    images: Optional[Dict[str, str]] = None,
    header: Optional[ReportHeader] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera el reporte PDF (A4):
      1. Beam Configuration
      2. Loads
      3. Analysis Results
      4. Diagrams (beam / shear / moment, si hay imagen)
    """
    header = header or ReportHeader()
    imgs = _normalize_images_dict(images)

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Cc", parent=styles["BodyText"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=header.title,
    )

    story: List[object] = []

    # ----------------- Encabezado -----------------
    story.append(Paragraph(header.title, styles["H1c"]))
    date = header.date or datetime.now()
    story.append(Paragraph(f"Date: {date.strftime('%Y-%m-%d')}", styles["Cc"]))
    if header.subtitle:
        story.append(Paragraph(header.subtitle, styles["Cc"]))
    if header.author:
        story.append(Paragraph(f"Author: {header.author}", styles["Cc"]))
    story.append(Spacer(1, 8 * mm))

    # ----------------- 1. Configuración -----------------
    cfg = case.config
    story.append(Paragraph("1. Beam Configuration", styles["Heading2"]))
    rows = [
        ["Beam Type", "Cantilever Beam" if cfg.is_cantilever else "Simple Beam"],
        ["Beam Cross Section", case.section.name],
        ["Section Dimensions", _section_dims(case)],
        ["Beam Length", f"{_f(cfg.length_mm, 2)} mm"],
    ]
    if not cfg.is_cantilever:
        rows += [
            ["Left Support", f"{_f(cfg.left_support_mm, 2)} mm"],
            ["Right Support", f"{_f(cfg.right_support_mm, 2)} mm"],
        ]
    rows += [
        ["Material", case.material.name],
        ["Yield Strength", f"{_f(case.material.yield_strength_mpa, 2)} MPa"],
        ["Elastic Modulus", f"{_f(case.material.elastic_modulus_gpa, 2)} GPa"],
        ["Density", f"{_f(case.material.density_kg_m3, 2)} kg/m^3"],
        ["Beam Weight", f"{result.beam_weight:.2f} N"],
    ]
    t = Table(rows, colWidths=[55 * mm, 115 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    # ----------------- 2. Cargas -----------------
    story.append(Paragraph("2. Loads", styles["Heading2"]))
    lrows = [["Load", "Type", "Magnitude", "Start [mm]", "End [mm]"]]
    for k, ld in enumerate(case.loads, start=1):
        if isinstance(ld, UniformLoad):
            lrows.append([f"Load {k}", "Uniform Load", f"{_f(ld.magnitude_n_per_m, 2)} N/m",
                          _f(ld.x0_mm, 2), _f(ld.x1_mm, 2)])
        else:
            lrows.append([f"Load {k}", "Point Load", f"{_f(ld.magnitude_n, 2)} N",
                          _f(ld.x_mm, 2), "-"])
    t = Table(lrows, colWidths=[22 * mm, 35 * mm, 40 * mm, 35 * mm, 35 * mm], repeatRows=1)
    t.setStyle(_grid_table_style(header_rows=1))
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    # ----------------- 3. Resultados -----------------
    story.append(Paragraph("3. Analysis Results", styles["Heading2"]))
    d = result.display_values()
    rrows = [
        ["Reaction R1", f"{result.r1:.2f} N"],
        ["Reaction R2", f"{result.r2:.2f} N"],
        ["Maximum Shear Force", f"{d['max_shear_force']} N"],
        ["Maximum Bending Moment", f"{d['max_bending_moment']} N·m"],
        ["Maximum Normal Stress", f"{d['max_normal_stress']} MPa"],
        ["Maximum Shear Stress", f"{d['max_shear_stress']} MPa"],
        ["Safety Factor", f"{d['safety_factor']}"],
        ["Center of Gravity", f"{d['center_of_gravity']} m"],
        ["Moment of Inertia", f"{d['moment_of_inertia']} m^4"],
        ["Section Modulus", f"{d['section_modulus']} m^3"],
    ]
    t = Table(rrows, colWidths=[70 * mm, 100 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)

    # ----------------- 4. Diagramas -----------------
    story.append(PageBreak())
    story.append(Paragraph("4. Diagrams", styles["Heading2"]))
    _append_figure(story, styles, "beam", "Beam Diagram", imgs, max_w=170 * mm, max_h=70 * mm)
    _append_figure(story, styles, "shear", "Shear Force Diagram", imgs, max_w=170 * mm, max_h=75 * mm)
    _append_figure(story, styles, "moment", "Bending Moment Diagram", imgs, max_w=170 * mm, max_h=75 * mm)

    doc.build(story)
    logger.info("Reporte PDF generado: %s", out_pdf_path)


def build_report(
    case: BeamCase,
    out_pdf_path: Optional[str] = None,
    settings: Optional[Settings] = None,
    header: Optional[ReportHeader] = None,
) -> str:
    """
    Calcula, exporta los gráficos a un directorio temporal y arma el PDF.
    Devuelve el path del PDF.
    """
    settings = settings or Settings.from_env()
    out_pdf_path = out_pdf_path or settings.report_name

    result = analyze_case(case, gravity=settings.gravity)

    with tempfile.TemporaryDirectory(prefix="beam_calc_") as td:
        images = export_charts(case, td, settings=settings)
        missing = sorted(set(("beam", "shear", "moment")) - set(images))
        if missing:
            logger.warning("Reporte sin imágenes: %s", ", ".join(missing))
        export_report_pdf(out_pdf_path, case, result, images=images, header=header)

    return out_pdf_path


# ----------------- helpers -----------------

def _section_dims(case: BeamCase) -> str:
    s = case.section
    if isinstance(s, Rectangular):
        return f"W={_f(s.width_mm, 2)} mm, H={_f(s.height_mm, 2)} mm"
    if isinstance(s, (IBeam, CChannel)):
        return (
            f"bf={_f(s.flange_width_mm, 2)} mm, tf={_f(s.flange_thickness_mm, 2)} mm, "
            f"tw={_f(s.web_thickness_mm, 2)} mm, H={_f(s.height_mm, 2)} mm"
        )
    if isinstance(s, Circular):
        return f"D={_f(s.diameter_mm, 2)} mm"
    return "-"


def _normalize_images_dict(images: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not images:
        return {}
    out: Dict[str, str] = {}
    for k, v in images.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if not kk or not vv:
            continue
        out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    story.append(Paragraph(title, styles["Heading3"]))
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        # Dejar evidencia en el PDF si no se insertó la imagen
        story.append(Paragraph(f"(No image: '{key}' not available)", styles["Small"]))
    story.append(Spacer(1, 4 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _grid_table_style(header_rows: int = 1, font_size: int = 9):
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
