from finder_app.normalizer import normalize, tokenize


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Fox.") == "fox"
    assert normalize("Fox.") == normalize("fox")
    assert normalize("don't!") == "dont"
    assert normalize("") == ""


def test_normalize_is_idempotent():
    for token in ["Hello,", "¿Qué?", "a-b_c", "...", "MiXeD Case.", "  spaced  "]:
        once = normalize(token)
        assert normalize(once) == once


def test_normalize_keeps_accents_and_inner_spaces():
    assert normalize("Canción") == "canción"
    assert normalize("quick, brown").split() == ["quick", "brown"]


def test_tokenize_splits_on_whitespace():
    assert tokenize("  The quick\tbrown\n fox ") == ["The", "quick", "brown", "fox"]
    assert tokenize("   ") == []
