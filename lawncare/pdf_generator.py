"""
PDF Invoice Generator: the page's print action.

Renders an invoice record (see InvoiceEngine.build_invoice) as a one-page
PDF. Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Company header + invoice date
2. Bill to (customer details block)
3. Property size
4. Charges
5. Totals (invoice total highlighted)
"""

from datetime import date

from fpdf import FPDF


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        text
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


def _date_display(iso_date: str) -> str:
    """Long-form date; a value that is not an ISO date is printed as given."""
    try:
        return date.fromisoformat(iso_date).strftime("%B %d, %Y")
    except (ValueError, TypeError):
        return _safe(str(iso_date or ""))


class InvoicePDF(FPDF):
    """Custom PDF class for lawncare invoices."""

    def __init__(self, company_name=""):
        super().__init__()
        self.company_name = company_name
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, _safe(f"Thank you for choosing {self.company_name}"), align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(46, 94, 50)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def amount_row(self, label, display, bold=False):
        self.set_font("Helvetica", "B" if bold else "", 10)
        self.cell(130, 6, _safe(label))
        self.cell(60, 6, display, align="R")
        self.ln()


def generate_invoice_pdf(invoice: dict) -> bytes:
    """
    Generate a PDF invoice document.

    Args:
        invoice: invoice record from InvoiceEngine.build_invoice

    Returns:
        PDF bytes
    """
    company = invoice.get("company", {})
    company_name = company.get("name") or "Invoice"
    company_info = " | ".join(p for p in [company.get("address"), company.get("phone")] if p)

    pdf = InvoicePDF(company_name=company_name)
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(company_name), new_x="LMARGIN", new_y="NEXT")
    if company_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "INVOICE", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {_date_display(invoice.get('invoice_date'))}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    # ── SECTION 2: Bill to ──
    pdf.section_header("BILL TO")
    pdf.set_font("Helvetica", "", 10)
    pdf.multi_cell(pw, 5, _safe(invoice.get("customer_details", "")), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 3: Property ──
    pdf.section_header("PROPERTY")
    pdf.amount_row("Property size (sq ft)", invoice.get("property_size", ""))
    pdf.ln(4)

    # ── SECTION 4: Charges ──
    pdf.section_header("CHARGES")
    for item in invoice.get("line_items", []):
        pdf.amount_row(item["label"], item["display"])
    pdf.ln(2)

    # ── SECTION 5: Totals ──
    totals = invoice.get("totals", [])
    grand_total = None
    pdf.set_draw_color(200, 200, 200)
    pdf.line(pdf.l_margin, pdf.get_y(), pdf.w - pdf.r_margin, pdf.get_y())
    pdf.ln(1)
    for item in totals:
        if item["key"] == "total":
            grand_total = item
            continue
        pdf.amount_row(item["label"], item["display"], bold=item["key"] == "subtotal")

    if grand_total:
        pdf.ln(1)
        pdf.set_fill_color(46, 94, 50)
        pdf.set_text_color(255, 255, 255)
        pdf.set_font("Helvetica", "B", 13)
        pdf.cell(130, 10, f"  {grand_total['label'].upper()}", fill=True)
        pdf.cell(60, 10, f"{grand_total['display']}  ", fill=True, align="R")
        pdf.set_text_color(0, 0, 0)
        pdf.ln(14)

    return pdf.output()
