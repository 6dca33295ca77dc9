"""PDF export of a single patient assessment (reportlab platypus)."""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Image as RLImage
from reportlab.platypus import ListFlowable, ListItem, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.db.models import PatientAssessment
from app.i18n import translate
from app.reference.catalog import duration_label, symptom_label

logger = logging.getLogger(__name__)

# Built-in Type 1 fonts only cover Latin-1 glyphs
_PDF_LANGUAGES = ("en", "es", "fr")

# Stand-ins for symbols outside the built-in fonts
_LATIN1_SUBSTITUTES = str.maketrans({"≥": ">=", "≤": "<=", "⚠": "!", "\ufe0f": ""})


def pdf_text(text: str) -> str:
    return escape(text.translate(_LATIN1_SUBSTITUTES)).replace("\n", "<br/>")


_CONFIDENCE_COLORS = {
    "high": colors.HexColor("#ef4444"),
    "medium": colors.HexColor("#f59e0b"),
    "low": colors.HexColor("#3b82f6"),
}


class AssessmentPDFBuilder:
    """Lays out an assessment report; one instance per document."""

    def __init__(self, language: str = "en") -> None:
        if language not in _PDF_LANGUAGES:
            logger.info("No PDF font for language %s, using English", language)
            language = "en"
        self.language = language
        self.styles = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            "ReportTitle",
            parent=self.styles["Title"],
            fontSize=22,
            spaceAfter=18,
            textColor=colors.HexColor("#2563eb"),
        )
        self.section_style = ParagraphStyle(
            "SectionHeader",
            parent=self.styles["Heading2"],
            fontSize=14,
            spaceBefore=14,
            spaceAfter=8,
            textColor=colors.HexColor("#1e40af"),
        )
        self.normal_style = ParagraphStyle(
            "ReportNormal",
            parent=self.styles["Normal"],
            fontSize=10.5,
            leading=14,
            spaceAfter=6,
        )
        self.small_style = ParagraphStyle(
            "ReportSmall",
            parent=self.normal_style,
            fontSize=8.5,
            textColor=colors.HexColor("#6b7280"),
        )

    def t(self, key: str) -> str:
        return translate(key, self.language)

    def _p(self, text: str, style: ParagraphStyle | None = None) -> Paragraph:
        return Paragraph(pdf_text(text), style or self.normal_style)

    def _section(self, key: str) -> Paragraph:
        return Paragraph(escape(self.t(key)), self.section_style)

    def _patient_table(self, a: PatientAssessment) -> Table:
        rows = [
            [self.t("name"), a.patient_name],
            [self.t("age"), str(a.patient_age)],
            [self.t("gender"), self.t(a.patient_gender) if a.patient_gender else ""],
            [self.t("symptomDuration"), duration_label(a.symptom_duration)],
        ]
        table = Table(rows, colWidths=[2.2 * inch, 4.0 * inch])
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("BACKGROUND", (0, 0), (0, -1), colors.HexColor("#f3f4f6")),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#d1d5db")),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("PADDING", (0, 0), (-1, -1), 6),
        ]))
        return table

    def _confidence_table(self, a: PatientAssessment) -> Table:
        score = f"{round(a.confidence_score * 100)}%" if a.confidence_score is not None else "—"
        rows = [[
            self.t("confidenceLevel"),
            self.t(a.confidence),
            score,
            (a.classification or "").replace("_", " ").upper(),
        ]]
        table = Table(rows, colWidths=[1.8 * inch, 1.4 * inch, 1.0 * inch, 2.0 * inch])
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
            ("TEXTCOLOR", (1, 0), (1, 0), _CONFIDENCE_COLORS.get(a.confidence, colors.black)),
            ("BOX", (0, 0), (-1, -1), 0.75, colors.HexColor("#9ca3af")),
            ("PADDING", (0, 0), (-1, -1), 6),
        ]))
        return table

    def story(self, a: PatientAssessment, overlay_png: bytes | None = None) -> list:
        created = a.created_at or datetime.now(timezone.utc)
        story: list = [
            Paragraph(escape(self.t("appTitle")), self.title_style),
            self._p(f"{self.t('diagnosticResults')} — {created:%Y-%m-%d %H:%M} UTC", self.small_style),
            Spacer(1, 10),
            self._section("patientInfo"),
            self._patient_table(a),
            self._section("symptomsAssessment"),
            self._p(", ".join(symptom_label(s) for s in (a.symptoms or [])) or "—"),
        ]

        if a.medical_history:
            story += [self._section("medicalHistory"), self._p(a.medical_history)]
        if a.lab_results:
            story += [self._section("labResults"), self._p(a.lab_results)]

        story += [
            self._section("diagnosticResults"),
            self._confidence_table(a),
            Spacer(1, 8),
            self._p(a.diagnosis_summary),
            self._section("keyFindings"),
            ListFlowable(
                [ListItem(self._p(f)) for f in (a.findings or ["—"])],
                bulletType="bullet",
                leftIndent=12,
            ),
            self._section("recommendation"),
            self._p(a.recommendation),
        ]

        if overlay_png:
            img = RLImage(io.BytesIO(overlay_png))
            max_w = 6.0 * inch
            if img.imageWidth > 0:
                ratio = min(max_w / img.imageWidth, 1.0)
                img.drawWidth = img.imageWidth * ratio
                img.drawHeight = img.imageHeight * ratio
            story += [self._section("medicalImaging"), img]

        story += [
            self._section("disclaimer"),
            self._p(self.t("disclaimerText"), self.small_style),
        ]
        return story


def build_assessment_pdf(
    assessment: PatientAssessment,
    overlay_png: bytes | None = None,
    language: str = "en",
) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=60,
        leftMargin=60,
        topMargin=60,
        bottomMargin=60,
        title=f"TB Assessment - {assessment.patient_name}",
        author="TB Assist",
    )
    doc.build(AssessmentPDFBuilder(language).story(assessment, overlay_png))
    pdf_bytes = buffer.getvalue()

    if not pdf_bytes.startswith(b"%PDF"):
        raise RuntimeError("Generated file does not have a PDF header")

    logger.info("Generated PDF for assessment %s (%d bytes)", assessment.id, len(pdf_bytes))
    return pdf_bytes
