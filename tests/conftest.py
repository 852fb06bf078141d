from pathlib import Path

import pytest
from pypdf import PdfReader, PdfWriter


def write_pdf(path: Path, widths: list[int]) -> Path:
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=200)
    with path.open("wb") as handle:
        writer.write(handle)
    return path


def page_widths(path: Path) -> list[int]:
    reader = PdfReader(str(path))
    return [int(float(page.mediabox.width)) for page in reader.pages]


@pytest.fixture
def make_pdf():
    return write_pdf


@pytest.fixture
def read_widths():
    return page_widths
