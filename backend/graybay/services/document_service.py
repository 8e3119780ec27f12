"""
Document service.
Renders the onboarding selection as a printable PDF quote.
"""

import io
import random
import re
from typing import List
from urllib.parse import quote

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from graybay.core.config import settings
from graybay.core.logging import get_logger
from graybay.schemas.onboarding import OnboardingRequest, SelectedService
from graybay.services.base_service import BaseService
from graybay.utils.dates import utcnow

logger = get_logger(__name__)

HEADER_FILL = Color(0.259, 0.322, 0.431)  # #42526E
TABLE_HEAD_FILL = HexColor("#F0F0F0")
RULE = HexColor("#C8C8C8")
BLACK = HexColor("#000000")
WHITE = HexColor("#FFFFFF")

# Layout in millimetres, measured from the top-left corner
LEFT = 20
TOP = 20
HEADER_HEIGHT = 40
BOTTOM_MARGIN = 40
TERMS_SPACE = 80
COLUMNS = ["Service", "Description", "Monthly Cost"]
COLUMN_WIDTHS = [60, 80, 40]
MIN_ROW_HEIGHT = 15

TERMS = [
    "1. All prices are in USD and billed monthly.",
    "2. Services can be cancelled with 30 days notice.",
    "3. Quote valid for 30 days from the date of issue.",
    "4. Prices include standard support during business hours.",
    "5. Additional customization may incur extra charges.",
]

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


def quote_filename(company_name: str) -> str:
    """Whitespace runs become underscores: 'Acme Dental Co' -> Acme_Dental_Co_quote.pdf."""
    stem = re.sub(r"\s+", "_", company_name)
    return f"{stem}_quote.pdf"


def content_disposition(filename: str) -> str:
    """
    Attachment header for a generated file.
    The plain `filename` keeps printable ASCII only; `filename*` carries the full UTF-8 name.
    """
    fallback = re.sub(r'[^\x20-\x7e]|["\\]', "", filename) or "quote.pdf"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _money(value: float) -> str:
    if float(value).is_integer():
        return f"${int(value)}"
    return f"${value:,.2f}"


class _QuoteCanvas:
    """Top-down cursor over a reportlab canvas, in millimetres."""

    def __init__(self, buffer: io.BytesIO):
        self.canvas = canvas.Canvas(buffer, pagesize=A4)
        self.page_width, self.page_height = (dim / mm for dim in A4)
        self.y = TOP

    def _pdf_y(self, y: float) -> float:
        return (self.page_height - y) * mm

    def new_page(self) -> None:
        self.canvas.showPage()
        self.y = TOP

    def ensure_space(self, needed: float) -> None:
        if self.y > self.page_height - needed:
            self.new_page()

    def text(self, value: str, x: float, y: float, size: float = 12, bold: bool = False) -> None:
        self.canvas.setFont(FONT_BOLD if bold else FONT, size)
        self.canvas.drawString(x * mm, self._pdf_y(y), value)

    def line_of_text(self, value: str, size: float = 12, bold: bool = False) -> None:
        """Write one line at the left margin and advance the cursor."""
        self.text(value, LEFT, self.y, size=size, bold=bold)
        self.y += size / 2 + 4

    def fill_rect(self, x: float, y: float, width: float, height: float, color) -> None:
        self.canvas.setFillColor(color)
        self.canvas.rect(x * mm, self._pdf_y(y + height), width * mm, height * mm, stroke=0, fill=1)

    def rule(self, y: float) -> None:
        self.canvas.setStrokeColor(RULE)
        self.canvas.line(LEFT * mm, self._pdf_y(y), (self.page_width - LEFT) * mm, self._pdf_y(y))


class DocumentService(BaseService):
    """Service for generated documents."""

    def render_quote(self, data: OnboardingRequest) -> bytes:
        """Render the quote PDF and return its bytes."""
        buffer = io.BytesIO()
        pdf = _QuoteCanvas(buffer)
        quote_ref = random.randrange(10000)
        today = utcnow()

        self._draw_header(pdf)
        pdf.y += 10
        pdf.line_of_text(f"Date: {today.strftime('%B')} {today.day}, {today.year}", 10)
        pdf.line_of_text(f"Quote #: {quote_ref}", 10)
        pdf.y += 10

        company = data.company_info
        pdf.line_of_text("Client Information", 14, bold=True)
        pdf.line_of_text(f"Company: {company.name}")
        pdf.line_of_text(f"Website: {company.website or ''}")
        pdf.line_of_text(f"Industry: {company.industry or ''}")
        pdf.line_of_text(f"Size: {company.size or ''}")
        pdf.y += 10

        primary = data.contacts.primary
        pdf.line_of_text("Primary Contact", 14, bold=True)
        pdf.line_of_text(f"Name: {primary.name}")
        pdf.line_of_text(f"Role: {primary.role or ''}")
        pdf.line_of_text(f"Email: {primary.email or ''}")
        pdf.line_of_text(f"Phone: {primary.phone or ''}")
        pdf.y += 10

        included = [service for service in data.selected_services if service.included]
        self._draw_services(pdf, included)
        self._draw_terms(pdf)

        pdf.canvas.showPage()
        pdf.canvas.save()
        logger.info(
            "Quote document rendered",
            extra={"company": company.name, "services": len(included), "quote_ref": quote_ref},
        )
        return buffer.getvalue()

    def _draw_header(self, pdf: _QuoteCanvas) -> None:
        pdf.fill_rect(0, 0, pdf.page_width, HEADER_HEIGHT, HEADER_FILL)
        pdf.canvas.setFillColor(WHITE)
        pdf.line_of_text(settings.COMPANY_NAME, 24, bold=True)
        pdf.line_of_text("Service Quote", 16)
        pdf.canvas.setFillColor(BLACK)

    def _draw_services(self, pdf: _QuoteCanvas, services: List[SelectedService]) -> None:
        pdf.line_of_text("Selected Services", 14, bold=True)
        pdf.y += 5

        pdf.fill_rect(LEFT, pdf.y - 5, pdf.page_width - 2 * LEFT, 10, TABLE_HEAD_FILL)
        pdf.canvas.setFillColor(BLACK)
        x = LEFT
        for column, width in zip(COLUMNS, COLUMN_WIDTHS):
            pdf.text(column, x, pdf.y, size=10, bold=True)
            x += width
        pdf.y += 15

        for service in services:
            pdf.ensure_space(BOTTOM_MARGIN)
            x = LEFT
            pdf.text(service.name, x, pdf.y, size=10)
            x += COLUMN_WIDTHS[0]

            lines = simpleSplit(service.description or "", FONT, 10, (COLUMN_WIDTHS[1] - 5) * mm) or [""]
            for index, line in enumerate(lines):
                pdf.text(line, x, pdf.y + index * 5, size=10)
            x += COLUMN_WIDTHS[1]

            pdf.text(f"{_money(service.custom_price)}/mo", x, pdf.y, size=10)
            pdf.y += max(len(lines) * 12, MIN_ROW_HEIGHT)

        pdf.y += 10
        total = sum(service.custom_price for service in services)
        pdf.rule(pdf.y)
        pdf.y += 10
        pdf.text("Total Monthly Cost:", LEFT, pdf.y, size=12, bold=True)
        pdf.text(f"{_money(total)}/mo", pdf.page_width - 60, pdf.y, size=12, bold=True)
        pdf.y += 20

    def _draw_terms(self, pdf: _QuoteCanvas) -> None:
        pdf.ensure_space(TERMS_SPACE)
        pdf.line_of_text("Terms and Conditions", 14, bold=True)
        for term in TERMS:
            pdf.line_of_text(term, 10)
