from io import BytesIO
from typing import Dict, List, Tuple

PAGE_WIDTH, PAGE_HEIGHT = 595, 842  # A4 in points
MARGIN = 10
LEFT = 40
TOP = PAGE_HEIGHT - 40

STYLES = {
    "header": {"font_size": 18, "font": "/F1"},
    "subHeader": {"font_size": 13, "font": "/F1"},
}


def escape(text: str) -> str:
    return text.replace("\\", r"\\").replace("(", r"\(").replace(")", r"\)")


def get_doc_definition(media: Dict) -> List[Tuple[str, str]]:
    return [
        (str(media.get("Title", "")), "header"),
        (str(media.get("Year", "")), "subHeader"),
        (str(media.get("Type", "")), "subHeader"),
    ]


def build_pdf_bytes(content: List[Tuple[str, str]]) -> bytes:
    """
    Lays out (text, style) blocks top to bottom on a single page, each with a
    margin above and below, in bold Helvetica.
    """
    content_lines = ["BT"]
    y = TOP
    for text, style_name in content:
        style = STYLES[style_name]
        y -= MARGIN + style["font_size"]
        content_lines.append(f"{style['font']} {style['font_size']} Tf")
        content_lines.append(f"1 0 0 1 {LEFT + MARGIN} {y} Tm")
        content_lines.append(f"({escape(text)}) Tj")
        y -= MARGIN
    content_lines.append("ET")
    content_stream = "\n".join(content_lines).encode("latin-1", errors="replace")

    objects: List[bytes] = []
    objects.append(b"1 0 obj\n<< /Type /Catalog /Pages 2 0 R >>\nendobj\n")
    objects.append(b"2 0 obj\n<< /Type /Pages /Kids [3 0 R] /Count 1 >>\nendobj\n")
    page_obj = (
        "3 0 obj\n"
        f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {PAGE_WIDTH} {PAGE_HEIGHT}] "
        "/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>\n"
        "endobj\n"
    ).encode("utf-8")
    objects.append(page_obj)
    objects.append(
        f"4 0 obj\n<< /Length {len(content_stream)} >>\nstream\n".encode("utf-8")
        + content_stream
        + b"\nendstream\nendobj\n"
    )
    objects.append(
        b"5 0 obj\n<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold "
        b"/Encoding /WinAnsiEncoding >>\nendobj\n"
    )

    pdf_bytes = bytearray()
    pdf_bytes.extend(b"%PDF-1.4\n%\xff\xff\xff\xff\n")
    offsets = [0]
    for obj in objects:
        offsets.append(len(pdf_bytes))
        pdf_bytes.extend(obj)

    xref_offset = len(pdf_bytes)
    count = len(objects) + 1
    xref = ["xref\n0 {}\n".format(count), "0000000000 65535 f \n"]
    for offset in offsets[1:]:
        xref.append(f"{offset:010d} 00000 n \n")
    pdf_bytes.extend("".join(xref).encode("utf-8"))
    trailer = (
        f"trailer\n<< /Size {count} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF"
    ).encode("utf-8")
    pdf_bytes.extend(trailer)
    return bytes(pdf_bytes)


def get_pdf_readable_stream(media: Dict) -> BytesIO:
    stream = BytesIO(build_pdf_bytes(get_doc_definition(media)))
    stream.seek(0)
    return stream
