import re
import unicodedata
from typing import List

_WORD = re.compile(r"[^\W_]+")
_FENCE_OPEN = re.compile(r"^```(?:[a-z]+)?[ \t]*\n?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\n?```[ \t]*$")
_HEADING = re.compile(r"^[ \t]{0,3}#{1,6}[ \t]+", re.MULTILINE)
_BULLET = re.compile(r"^[ \t]*(?:[-*+•]|\d+[.)])[ \t]+", re.MULTILINE)
_EMPHASIS = re.compile(r"(\*\*|__|\*)(?=\S)(.+?)(?<=\S)\1")
_INLINE_CODE = re.compile(r"`([^`]*)`")
_LABEL = re.compile(r"^\s*(?:positioning statement|tagline|uvp|insights?)\s*:\s*", re.IGNORECASE)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space."""
    return re.sub(r"\s+", " ", text or "").strip()


def word_tokens(text: str) -> List[str]:
    """Casefolded letter/digit words of ``text`` in order of appearance (Unicode-aware)."""
    return _WORD.findall(unicodedata.normalize("NFKC", text or "").casefold())


def word_key(word: str) -> str:
    """Casefolded letter/digit form of a single word ("Acme's," -> "acmes")."""
    return "".join(word_tokens(word))


def strip_code_fences(text: str) -> str:
    """
    Remove a single leading/trailing fenced block like:
      ```markdown ... ```
      ```text ... ```
      ``` ... ```
    without destroying inline backticks inside the content.
    """
    if not text:
        return ""
    t = text.strip()
    m = _FENCE_OPEN.match(t)
    if m:
        t = t[m.end():]
        t = _FENCE_CLOSE.sub("", t)
    return t.strip()


def strip_markdown(text: str) -> str:
    """Drop headings, list markers, emphasis and inline code marks, keeping the words."""
    if not text:
        return ""
    t = _HEADING.sub("", text)
    t = _BULLET.sub("", t)
    t = _INLINE_CODE.sub(r"\1", t)
    t = _EMPHASIS.sub(r"\2", t)
    t = _LABEL.sub("", t)
    return t


def clean_text(text: str, keep_lines: bool = False) -> str:
    """
    Light post-processing for model replies.

    Strips code fences and markdown, then collapses whitespace. With
    ``keep_lines`` each non-empty line is collapsed on its own and the lines
    are rejoined with single newlines (used for the multi-sentence UVP).
    """
    t = strip_markdown(strip_code_fences(text))
    if not keep_lines:
        return normalize_whitespace(t)
    lines = [normalize_whitespace(line) for line in t.splitlines()]
    return "\n".join(line for line in lines if line)
