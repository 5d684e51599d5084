import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from xml.sax.saxutils import escape

from dishbank.utilities.constants import CATEGORY_LABELS


def generate_pdf_for_menu(entries, grocery_lines):
    """Generate a printable PDF: weekly menu table (Dish / Category / Quantity) and the grocery list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Weekly Menu", styles["Title"]),
        Spacer(1, 16),
    ]

    if entries:
        data = [["Dish", "Category", "Quantity"]]
        for entry in entries:
            data.append([
                entry.dish.title,
                CATEGORY_LABELS.get(entry.dish.category, entry.dish.category),
                str(entry.quantity),
            ])
        table = Table(data, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (2,0), (2,-1), "CENTER"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,0), 12),
            ("BOTTOMPADDING", (0,0), (-1,0), 10),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
    else:
        elements.append(Paragraph("No dishes selected.", styles["Normal"]))

    elements += [Spacer(1, 16), Paragraph("Grocery List", styles["Heading2"])]
    for line in grocery_lines:
        # Paragraph parses markup, ingredient names may contain & or <
        elements.append(Paragraph(escape(line), styles["Normal"]))

    doc.build(elements)
    return buf.getvalue()
