"""PDF rendering of a verification result with reportlab platypus."""

import io
import re
from collections.abc import Callable
from datetime import date, datetime
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from docverify.history.serializer import details_to_dict
from docverify.logging.logger import Log
from docverify.verification.models import TAX_STATUS_CURRENT, VerificationResult

REPORT_TITLE = "Land Verification Report"
REPORT_SUBTITLE = "Tamil Nadu Land Records Verification System"
NOT_SPECIFIED = "Not specified"

SUCCESS_COLOR = colors.HexColor("#2ECC71")
WARNING_COLOR = colors.HexColor("#F1C40F")
ERROR_COLOR = colors.HexColor("#E74C3C")
HEADER_COLOR = colors.HexColor("#3498DB")
ROW_SHADE = colors.HexColor("#ECF0F1")
TEXT_COLOR = colors.HexColor("#2C3E50")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

MARGIN = 40


def default_filename(result: VerificationResult, on: date | None = None) -> str:
    on = on or date.today()
    return f"land_verification_report_{result.id}_{on.isoformat()}.pdf"


def check_label(key: str) -> str:
    """'ownershipVerified' -> 'Ownership Verified'."""
    words = _CAMEL_BOUNDARY.sub(" ", key).split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def check_color(value: object) -> colors.Color:
    if value is True or value in ("Registered", TAX_STATUS_CURRENT):
        return SUCCESS_COLOR
    if value is False:
        return ERROR_COLOR
    return WARNING_COLOR


def _text(value: object) -> str:
    if value is None:
        return NOT_SPECIFIED
    text = str(value).strip()
    return text or NOT_SPECIFIED


def _footer_canvas(generated_on: str) -> type[canvas.Canvas]:
    """Canvas class that stamps the footer once the total page count is known."""

    class FooterCanvas(canvas.Canvas):
        def __init__(self, *args: Any, **kwargs: Any) -> None:
            super().__init__(*args, **kwargs)
            self._saved_pages: list[dict[str, Any]] = []

        def showPage(self) -> None:
            self._saved_pages.append(dict(self.__dict__))
            self._startPage()

        def save(self) -> None:
            total = len(self._saved_pages)
            for state in self._saved_pages:
                self.__dict__.update(state)
                self._draw_footer(total)
                super().showPage()
            super().save()

        def _draw_footer(self, total: int) -> None:
            width, _ = self._pagesize
            self.saveState()
            self.setFont("Helvetica", 8)
            self.setFillColor(TEXT_COLOR)
            self.drawString(MARGIN, 20, f"Generated on: {generated_on}")
            self.drawRightString(width - MARGIN, 20, f"Page {self._pageNumber} of {total}")
            self.restoreState()

    return FooterCanvas


class ReportRenderer:
    """Renders a flat VerificationResult to PDF bytes.

    Missing or empty values render as "Not specified"; rendering never
    fails because of a missing field.
    """

    def __init__(self, now: Callable[[], datetime] = datetime.now) -> None:
        self._now = now
        styles = getSampleStyleSheet()
        self._normal = ParagraphStyle(
            name="ReportNormal", parent=styles["Normal"], fontName="Helvetica", fontSize=10, leading=13
        )
        self._title = ParagraphStyle(
            name="ReportTitle", parent=styles["Title"], fontName="Helvetica-Bold", textColor=TEXT_COLOR
        )
        self._subtitle = ParagraphStyle(
            name="ReportSubtitle", parent=styles["Normal"], alignment=1, textColor=colors.grey
        )
        self._heading = ParagraphStyle(
            name="ReportHeading",
            parent=styles["Heading2"],
            fontName="Helvetica-Bold",
            textColor=TEXT_COLOR,
            spaceBefore=10,
            spaceAfter=6,
        )

    def render(self, result: VerificationResult) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            rightMargin=MARGIN,
            leftMargin=MARGIN,
            topMargin=50,
            bottomMargin=50,
            title=REPORT_TITLE,
        )
        generated_on = self._now().strftime("%Y-%m-%d %H:%M:%S")

        elements = [
            Paragraph(REPORT_TITLE, self._title),
            Paragraph(REPORT_SUBTITLE, self._subtitle),
            Spacer(1, 12),
        ]
        elements += self._document_info(result, generated_on)
        elements += self._summary(result)
        elements += self._checks(result)
        elements += self._property_details(result)
        elements += self._discrepancies(result)

        doc.build(elements, canvasmaker=_footer_canvas(generated_on))
        Log.info(f"Rendered verification report for {result.id}")
        return buf.getvalue()

    def _p(self, value: object) -> Paragraph:
        return Paragraph(escape(_text(value)), self._normal)

    def _label_table(self, rows: list[tuple[str, object]]) -> Table:
        table = Table(
            [[Paragraph(f"<b>{escape(label)}:</b>", self._normal), self._p(value)] for label, value in rows],
            colWidths=[140, 375],
        )
        table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("TOPPADDING", (0, 0), (-1, -1), 2),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
                ]
            )
        )
        return table

    def _document_info(self, result: VerificationResult, generated_on: str) -> list:
        return [
            Paragraph("Document Information", self._heading),
            self._label_table(
                [
                    ("Document Name", result.document_name),
                    ("Document Type", result.document_type),
                    ("Verification Date", generated_on.split(" ")[0]),
                    ("Report ID", result.id),
                ]
            ),
        ]

    def _summary(self, result: VerificationResult) -> list:
        badge_color = SUCCESS_COLOR if result.is_legal else ERROR_COLOR
        badge = Table(
            [
                [
                    Paragraph(
                        f'<font color="white"><b>{"VERIFIED" if result.is_legal else "ISSUES"}</b></font>',
                        self._normal,
                    ),
                    self._p(f"Status: {_text(result.status)}"),
                ]
            ],
            colWidths=[80, 435],
        )
        badge.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (0, 0), badge_color),
                    ("ALIGN", (0, 0), (0, 0), "CENTER"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )

        panel = Table(
            [
                ["Confidence Score", "Ownership Type", "Legal Status"],
                [
                    f"{result.confidence}%",
                    _text(result.ownership_type),
                    "Legal & Valid" if result.is_legal else "Issues Found",
                ],
            ],
            colWidths=[171, 172, 172],
        )
        panel.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), ROW_SHADE),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica"),
                    ("FONTSIZE", (0, 0), (-1, 0), 8),
                    ("FONTNAME", (0, 1), (-1, 1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 1), (-1, 1), 12),
                    ("TEXTCOLOR", (0, 0), (-1, -1), TEXT_COLOR),
                    ("BOX", (0, 0), (0, -1), 0.5, colors.white),
                    ("BOX", (1, 0), (1, -1), 0.5, colors.white),
                    ("BOX", (2, 0), (2, -1), 0.5, colors.white),
                ]
            )
        )
        return [
            Paragraph("Verification Summary", self._heading),
            badge,
            Spacer(1, 8),
            panel,
        ]

    def _checks(self, result: VerificationResult) -> list:
        data: list[list] = [["Check", "Status", "Result"]]
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
        ]
        for index, (key, value) in enumerate(details_to_dict(result.verification_details).items(), 1):
            shown = ("Verified" if value else "Failed") if isinstance(value, bool) else value
            hex_color = check_color(value).hexval().replace("0x", "#")
            data.append(
                [
                    check_label(key),
                    Paragraph(f'<font color="{hex_color}" size="16">•</font>', self._normal),
                    _text(shown),
                ]
            )
            if index % 2 == 1:
                style.append(("BACKGROUND", (0, index), (-1, index), ROW_SHADE))

        table = Table(data, colWidths=[200, 80, 235], repeatRows=1)
        table.setStyle(TableStyle(style))
        return [Paragraph("Verification Checks", self._heading), table]

    def _property_details(self, result: VerificationResult) -> list:
        return [
            Paragraph("Property Details", self._heading),
            self._label_table(
                [
                    ("Survey Number", result.survey_number),
                    ("Area", result.area),
                    ("Owner", result.owner),
                    ("District", result.district),
                    ("Taluk", result.taluk),
                    ("Village", result.village),
                    ("Classification", result.classification),
                ]
            ),
        ]

    def _discrepancies(self, result: VerificationResult) -> list:
        if not result.discrepancies:
            return []
        return [Paragraph("Discrepancies Found", self._heading)] + [
            Paragraph(f"• {escape(_text(item))}", self._normal) for item in result.discrepancies
        ]
