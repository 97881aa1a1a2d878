from finder_app.finder import DocumentFinder
from finder_app.messages import no_results_response


def _library(tmp_path):
    (tmp_path / "one.txt").write_text("The quick brown fox.\nIt jumps over the lazy dog.\n", encoding="utf-8")
    (tmp_path / "two.txt").write_text("A lazy afternoon.\nThe fox sleeps\n", encoding="utf-8")
    (tmp_path / "broken.docx").write_bytes(b"not a zip")
    return tmp_path


def test_load_and_search_library(tmp_path):
    finder = DocumentFinder(_library(tmp_path))
    total = finder.load_library(show_progress=False)
    assert total == 16
    assert sorted(p.name for p in finder.documents) == ["one.txt", "two.txt"]
    assert [p.name for p in finder.failed] == ["broken.docx"]

    results = finder.search("fox", sort_by="position")
    assert [(r.document.endswith("one.txt"), r.line) for r in results] == [(True, 1), (False, 2)]


def test_phrase_does_not_cross_documents(tmp_path):
    finder = DocumentFinder(_library(tmp_path))
    finder.load_library(show_progress=False)
    # "dog." ends one.txt (sorted first) and "A" starts two.txt
    assert finder.search("dog a") == []
    assert len(finder.search("lazy dog")) == 1


def test_refresh_rebuilds_from_disk(tmp_path):
    lib = _library(tmp_path)
    finder = DocumentFinder(lib)
    finder.load_library(show_progress=False)
    (lib / "two.txt").unlink()
    finder.refresh()
    assert [p.name for p in finder.documents] == ["one.txt"]
    assert len(finder.search("fox")) == 1
    assert finder.search("afternoon") == []


def test_no_results_response_mentions_query():
    assert "fox" in no_results_response("fox")
    assert "separately" in no_results_response("red fox")
    assert no_results_response("  ") == "Type a word or phrase to search for."
