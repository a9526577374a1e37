"""
PDF ➜ raw text
– accepts a path or the uploaded bytes
– strips `(cid:N)` glyph artifacts
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from __future__ import annotations
from io import BytesIO
from pathlib import Path
import re, logging, warnings, pdfplumber

from errors import ExtractionError
from utils import _sha

log = logging.getLogger(__name__)

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

_CID_RE = re.compile(r"\(cid:\d+\)")


def pdf_to_text(pdf: str | Path | bytes) -> str:
    source = BytesIO(pdf) if isinstance(pdf, (bytes, bytearray)) else pdf
    try:
        with pdfplumber.open(source) as doc:
            pages = [p.extract_text() or "" for p in doc.pages]
    except Exception as exc:
        raise ExtractionError(f"Could not read PDF: {exc}") from exc

    text = _CID_RE.sub("", "\n".join(pages))
    if not text.strip():
        raise ExtractionError("The PDF contains no extractable text (is it a scan?)")

    log.info("Extracted %d chars from %d page(s), sha256 %s",
             len(text), len(pages), _sha(text)[:12])
    return text
