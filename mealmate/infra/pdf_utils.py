import io
from typing import Any, Dict, List
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def _fmt_qty(qty: float) -> str:
    return f"{qty:g}"


def generate_pdf_for_grocery_list(groups: List[Dict[str, Any]], cost: float, currency: str = "€",
                                  week_of: str = "") -> bytes:
    """Render the grouped grocery list as a printable PDF: Category / Item / Quantity."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    title = "Grocery List" + (f" – Week of {week_of}" if week_of else "")
    elements = [
        Paragraph(title, styles["Title"]),
        Paragraph(f"Est. weekly cost: {currency}{cost:.2f}", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Category", "Item", "Quantity"]]
    for group in groups:
        for item in group["items"]:
            data.append([group["category"], item.name, f"{_fmt_qty(item.qty)} {item.unit}"])
    if len(data) == 1:
        data.append(["", "All ingredients are covered by your pantry!", ""])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
