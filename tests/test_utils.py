from utils import clean_text, normalize_whitespace, strip_code_fences, word_key, word_tokens


def test_normalize_whitespace_collapses_newlines():
    assert normalize_whitespace("  one\n\ntwo\t three ") == "one two three"
    assert normalize_whitespace(None) == ""


def test_word_tokens_and_key():
    assert word_tokens("Grow, don't guess!") == ["grow", "don", "t", "guess"]
    assert word_key("Acme's,") == "acmes"


def test_strip_code_fences_keeps_inline_backticks():
    assert strip_code_fences("```markdown\n# Title\nUse `flag` here\n```") == "# Title\nUse `flag` here"
    assert strip_code_fences("no fences") == "no fences"
    assert strip_code_fences("") == ""


def test_clean_text_strips_markdown_and_collapses():
    assert clean_text("Positioning Statement: For busy  parents\nwho cook") == "For busy parents who cook"


def test_clean_text_keep_lines():
    raw = "**Bold** claim\n\n- point one\n- point   two\n1. point three"
    assert clean_text(raw, keep_lines=True) == "Bold claim\npoint one\npoint two\npoint three"


def test_word_tokens_keep_accented_letters():
    assert word_tokens("Müller, Zürich") == ["müller", "zürich"]
    assert word_tokens("STRASSE Straße") == ["strasse", "strasse"]
    assert word_key("Müller's") == "müllers"
    # Decomposed "u" + combining diaeresis folds to the same key
    assert word_key("Mu\u0308ller") == word_key("M\u00fcller")
