import pytest

from finder_app.errors import DocumentReadError
from finder_app.readers import DocxFileReader, PdfFileReader, TextFileReader, reader_for
from finder_app.word_index import WordIndex


def test_text_reader_tracks_lines_and_positions(tmp_path):
    p = tmp_path / "notes.txt"
    p.write_text("The quick brown\n\nfox jumps over\nthe lazy dog.\n", encoding="utf-8")
    index = WordIndex()
    count = TextFileReader().read(str(p), index)
    assert count == 9

    (fox,) = index.search_all_occurrences("fox")
    assert (fox.document, fox.position, fox.line, fox.line_position) == (str(p), 4, 3, 1)
    # phrase spans a line break
    (match,) = index.search_all_occurrences("brown fox")
    assert match.line == 1


def test_text_reader_missing_file_raises(tmp_path):
    with pytest.raises(DocumentReadError) as err:
        TextFileReader().read(str(tmp_path / "missing.txt"), WordIndex())
    assert err.value.path.endswith("missing.txt")


def test_docx_reader_one_paragraph_per_line(tmp_path):
    docx = pytest.importorskip("docx")
    p = tmp_path / "report.docx"
    document = docx.Document()
    document.add_paragraph("Annual report.")
    document.add_paragraph("Revenue grew strongly")
    document.save(str(p))

    index = WordIndex()
    assert DocxFileReader().read(str(p), index) == 5
    (hit,) = index.search_results("revenue grew")
    assert hit.line == 2
    assert hit.line_position == 1
    assert hit.snippet == "### Revenue grew ### strongly"


def test_docx_reader_rejects_invalid_file(tmp_path):
    pytest.importorskip("docx")
    p = tmp_path / "broken.docx"
    p.write_bytes(b"not a zip")
    with pytest.raises(DocumentReadError):
        DocxFileReader().read(str(p), WordIndex())


def test_pdf_reader_handles_empty_pdf(tmp_path):
    p = tmp_path / "empty.pdf"
    p.write_bytes(b"%PDF-1.4\n%%EOF\n")
    # pdfminer may parse this as zero pages or refuse it; either way nothing is indexed
    index = WordIndex()
    try:
        assert PdfFileReader().read(str(p), index) == 0
    except DocumentReadError:
        pass
    assert len(index) == 0


def test_reader_for_extension():
    assert isinstance(reader_for("a/b/Notes.TXT"), TextFileReader)
    assert isinstance(reader_for("x.pdf"), PdfFileReader)
    assert isinstance(reader_for("x.docx"), DocxFileReader)
    assert reader_for("x.doc") is None
