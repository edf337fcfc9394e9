"""
Invoice PDF rendering.

The layout mirrors the printed invoice: a header with the shop's details and
the invoice number/date/status, a "Bill To" block, the itemized table closed
by subtotal/tax/shipping/total rows, payment information and a footer.
The table repeats its header row when it spills onto further pages.
"""
from dataclasses import dataclass
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .models import Order

HEADING = colors.Color(31 / 255, 41 / 255, 55 / 255)
BODY = colors.Color(75 / 255, 85 / 255, 99 / 255)
MUTED = colors.Color(107 / 255, 114 / 255, 128 / 255)

MARGIN = 20 * mm


@dataclass
class CompanyInfo:
    name: str = "Home Decor"
    tagline: str = "Beautiful Home Decoration Items"
    address: str = "123 Decor Street, Design City, DC 12345"
    phone: str = "+1 (555) 123-4567"
    email: str = "info@homedecor.com"


def _money(value: float) -> str:
    return f"${value:,.2f}"


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()["Normal"]
    return {
        "company": ParagraphStyle("company", parent=base, fontSize=22, leading=26, textColor=BODY),
        "muted": ParagraphStyle("muted", parent=base, fontSize=9, leading=12, textColor=MUTED),
        "title": ParagraphStyle("title", parent=base, fontSize=20, leading=24, textColor=HEADING),
        "label": ParagraphStyle("label", parent=base, fontSize=9, leading=11, textColor=BODY),
        "value": ParagraphStyle("value", parent=base, fontSize=10, leading=13, textColor=HEADING),
        "section": ParagraphStyle(
            "section", parent=base, fontSize=13, leading=16, textColor=HEADING, spaceAfter=4
        ),
        "body": ParagraphStyle("body", parent=base, fontSize=10, leading=13, textColor=HEADING),
        "cell": ParagraphStyle("cell", parent=base, fontSize=9, leading=11, textColor=HEADING),
    }


def _p(text, style: ParagraphStyle) -> Paragraph:
    return Paragraph(escape(str(text or "")), style)


def _header(order: Order, company: CompanyInfo, s: dict) -> Table:
    left = [
        _p(company.name, s["company"]),
        Spacer(1, 2 * mm),
        _p(company.tagline, s["muted"]),
        _p(company.address, s["muted"]),
        _p(f"Phone: {company.phone} | Email: {company.email}", s["muted"]),
    ]
    created = order.created_at.strftime("%Y-%m-%d") if order.created_at else ""
    right = [
        _p("INVOICE", s["title"]),
        Spacer(1, 3 * mm),
        _p("Invoice Number:", s["label"]),
        _p(order.order_number, s["value"]),
        _p("Date:", s["label"]),
        _p(created, s["value"]),
        _p("Status:", s["label"]),
        _p(order.status.upper(), s["value"]),
    ]
    table = Table([[left, right]], colWidths=[110 * mm, 60 * mm])
    table.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), 0),
    ]))
    return table


def _bill_to(order: Order, s: dict) -> list:
    address = order.shipping_address or {}
    customer = order.user
    city_line = " ".join(
        part for part in (
            f"{address.get('city', '')},",
            address.get("state", ""),
            address.get("zip_code", ""),
        ) if part
    )
    lines = [
        customer.name if customer else address.get("name", ""),
        address.get("address", ""),
        city_line,
        address.get("country", ""),
        f"Email: {customer.email}" if customer else "",
        f"Phone: {(customer.phone if customer else None) or address.get('phone', '')}",
    ]
    return [_p("Bill To:", s["section"])] + [_p(line, s["body"]) for line in lines if line]


def _items_table(order: Order, s: dict) -> Table:
    rows = [["Item", "Qty", "Price", "Total"]]
    for item in order.items:
        rows.append([
            _p(item.product.name if item.product else item.product_name, s["cell"]),
            str(item.quantity),
            _money(item.price),
            _money(item.total),
        ])
    first_summary = len(rows)
    rows += [
        ["", "", "Subtotal:", _money(order.subtotal)],
        ["", "", "Tax:", _money(order.tax)],
        ["", "", "Shipping:", _money(order.shipping)],
        ["", "", "Total:", _money(order.total)],
    ]

    table = Table(
        rows,
        colWidths=[80 * mm, 20 * mm, 35 * mm, 35 * mm],
        repeatRows=1,
    )
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), BODY),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 10),
        ("FONTSIZE", (0, 1), (-1, -1), 9),
        ("GRID", (0, 0), (-1, first_summary - 1), 0.5, MUTED),
        ("ALIGN", (1, 1), (1, -1), "CENTER"),
        ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 5),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
        ("LINEABOVE", (2, first_summary), (-1, first_summary), 0.5, MUTED),
        ("FONTNAME", (2, -1), (-1, -1), "Helvetica-Bold"),
    ]))
    return table


def _footer_painter(company: CompanyInfo):
    def paint(canvas, doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(MUTED)
        canvas.drawString(MARGIN, 12 * mm, f"{company.name} | {company.email}")
        canvas.drawRightString(A4[0] - MARGIN, 12 * mm, f"Page {doc.page}")
        canvas.restoreState()
    return paint


def render_invoice(order: Order, company: CompanyInfo | None = None) -> bytes:
    """Renders the order (user, items and products loaded) as PDF bytes."""
    company = company or CompanyInfo()
    s = _styles()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN,
        bottomMargin=MARGIN,
        title=f"Invoice {order.order_number}",
        author=company.name,
    )

    story = [
        _header(order, company, s),
        Spacer(1, 10 * mm),
        *_bill_to(order, s),
        Spacer(1, 8 * mm),
        _items_table(order, s),
        Spacer(1, 10 * mm),
        _p("Payment Information:", s["section"]),
        _p(f"Payment Method: {order.payment_method.upper()}", s["body"]),
        _p(f"Payment Status: {order.payment_status.upper()}", s["body"]),
        _p(f"Order Status: {order.status.upper()}", s["body"]),
        Spacer(1, 12 * mm),
        _p("Thank you for your business!", s["muted"]),
        _p(f"For any questions, please contact us at {company.email}", s["muted"]),
    ]
    painter = _footer_painter(company)
    doc.build(story, onFirstPage=painter, onLaterPages=painter)
    return buffer.getvalue()
