# tagline_formatter.py
"""
Deterministic tagline normalizer.

Turns a raw model reply (several tagline options in free text) into exactly
three short phrases joined with " / ":

    split_candidates -> filter_candidate -> select_candidates -> format_selection

Everything here is pure and synchronous. ``format_tagline`` never raises;
unusable input ends up in the fallback phrases.
"""
import re
from typing import Callable, FrozenSet, Iterable, List, NamedTuple, Optional, Sequence

from models import Candidate
from utils import normalize_whitespace, word_key, word_tokens

TAGLINE_COUNT = 3
MIN_WORDS = 3
MAX_WORDS = 5
TARGET_WORDS = 4
LENGTH_WEIGHT = 10
SEPARATOR = " / "

BUZZWORDS: FrozenSet[str] = frozenset({
    "innovative", "innovation", "seamless", "seamlessly", "revolutionary",
    "revolutionize", "revolutionizing", "disruptive", "disrupt", "synergy",
    "synergies", "leverage", "leveraging", "robust", "scalable", "holistic",
    "paradigm", "gamechanger", "groundbreaking", "transformative", "turnkey",
    "frictionless", "supercharge", "unparalleled", "unleash", "empower",
    "empowering", "streamline", "streamlined", "nextgen", "ai", "powered",
})

EMOTION_WORDS: FrozenSet[str] = frozenset({
    "love", "joy", "free", "freedom", "trust", "proud", "pride", "confidence",
    "confident", "calm", "peace", "dream", "dreams", "bold", "brave", "hope",
    "belong", "thrive", "fearless", "courage", "delight", "heart", "clarity",
    "win", "grow", "rise", "believe", "together", "home", "safe", "sure",
    "breathe", "shine", "matter", "matters", "yours",
})

# Listed in score order so re-running the pipeline on a fallback
# result reproduces it.
FALLBACK_PHRASES = ("grow your value", "build what matters", "achieve your goals")

_NEWLINES = re.compile(r"[\r\n]+")
_SEPARATORS = re.compile(r"[•·●▪◦‣|/;,—–]|[.!?…]+")
_ENUMERATION = re.compile(r"^\s*\d+\s*[)\]:]\s*")
_HYPHENS = re.compile(r"[-‐‑‒]+")
_MARKS = re.compile(r"[\"“”„«»`\[\](){}<>*#~_]|(?<!\w)['‘’]|['‘’](?!\w)")
_NON_WORD = re.compile(r"[^\w\s]|_")
_HAS_ALNUM = re.compile(r"[^\W_]")
_HAS_LETTER = re.compile(r"[^\W\d_]")


# ---------------------------
# Tokenizer / cleaner
# ---------------------------
def _clean_fragment(fragment: str) -> str:
    t = _ENUMERATION.sub("", fragment)
    t = _HYPHENS.sub(" ", t)
    t = _MARKS.sub("", t)
    return normalize_whitespace(t)


def split_candidates(raw_text: str) -> List[str]:
    """Split a raw reply into cleaned, non-empty phrases in order of appearance."""
    text = _NEWLINES.sub(" ", raw_text or "")
    cleaned = (_clean_fragment(f) for f in _SEPARATORS.split(text))
    return [c for c in cleaned if c]


# ---------------------------
# Filter
# ---------------------------
def brand_tokens(brand_list_text: str) -> FrozenSet[str]:
    """Lowercase words of a free-form competitor list ("Acme, Globex Corp")."""
    return frozenset(word_tokens(brand_list_text or ""))


def _is_brand_word(word: str, brands: FrozenSet[str]) -> bool:
    lowered = word.lower()
    if lowered.endswith(("'s", "’s")):
        lowered = lowered[:-2]
    return word_key(lowered) in brands


def strip_brands(text: str, brands: FrozenSet[str]) -> Optional[str]:
    """
    Reject ``text`` when it holds a buzzword, otherwise drop competitor words.

    Returns None for rejected or emptied phrases. Words without any letter or
    digit are dropped together with the brand words.
    """
    if BUZZWORDS.intersection(word_tokens(text)):
        return None
    kept = [w for w in text.split() if _HAS_ALNUM.search(w) and not _is_brand_word(w, brands)]
    return normalize_whitespace(" ".join(kept)) or None


def filter_candidate(text: str, brands: FrozenSet[str]) -> Optional[str]:
    """Apply buzzword/brand filtering and the 3-5 word window."""
    stripped = strip_brands(text, brands)
    if stripped is None:
        return None
    words = stripped.split()
    if len(words) < MIN_WORDS:
        return None
    return " ".join(words[:MAX_WORDS])


# ---------------------------
# Scorer / selector
# ---------------------------
def score(candidate: Candidate) -> int:
    emotion = sum(1 for t in candidate.tokens if t in EMOTION_WORDS)
    return -abs(candidate.word_count - TARGET_WORDS) * LENGTH_WEIGHT + emotion


def _dedupe(phrases: Iterable[str]) -> List[Candidate]:
    seen = set()
    out = []
    for phrase in phrases:
        candidate = Candidate(display=phrase)
        if candidate.key in seen:
            continue
        seen.add(candidate.key)
        out.append(candidate)
    return out


def _rank(candidates: List[Candidate]) -> List[Candidate]:
    # sorted() is stable, so ties keep first-seen order
    return sorted(candidates, key=score, reverse=True)


def _already_chosen(chosen: List[Candidate], candidate: Candidate) -> bool:
    return any(c.key == candidate.key for c in chosen)


class _Pool(NamedTuple):
    ranked: List[Candidate]
    short: List[Candidate]
    brands: FrozenSet[str]


def _pick_disjoint(pool: _Pool, chosen: List[Candidate]) -> None:
    used = {t for c in chosen for t in c.tokens}
    for candidate in pool.ranked:
        if len(chosen) >= TAGLINE_COUNT:
            return
        if used.isdisjoint(candidate.tokens) and not _already_chosen(chosen, candidate):
            chosen.append(candidate)
            used.update(candidate.tokens)


def _fill_from(candidates: Iterable[Candidate], chosen: List[Candidate]) -> None:
    for candidate in candidates:
        if len(chosen) >= TAGLINE_COUNT:
            return
        if not _already_chosen(chosen, candidate):
            chosen.append(candidate)


def _pick_overlapping(pool: _Pool, chosen: List[Candidate]) -> None:
    _fill_from(pool.ranked, chosen)


def _pick_short(pool: _Pool, chosen: List[Candidate]) -> None:
    # Too-short phrases get padded to MIN_WORDS by the formatter
    _fill_from(pool.short, chosen)


def _pick_fallback(pool: _Pool, chosen: List[Candidate]) -> None:
    # Competitor words are stripped from the fallbacks too; the untouched
    # phrases are only used when a brand list swallows them whole.
    stripped = (strip_brands(p, pool.brands) for p in FALLBACK_PHRASES)
    _fill_from((Candidate(display=p) for p in stripped if p), chosen)
    _fill_from((Candidate(display=p) for p in FALLBACK_PHRASES), chosen)


SELECTION_STAGES: Sequence[Callable[[_Pool, List[Candidate]], None]] = (
    _pick_disjoint,
    _pick_overlapping,
    _pick_short,
    _pick_fallback,
)


def select_candidates(
    candidates: Iterable[str],
    short: Iterable[str] = (),
    brands: FrozenSet[str] = frozenset(),
) -> List[Candidate]:
    """
    Choose exactly three phrases.

    Stages run in order until three are chosen: word-disjoint picks by score,
    overlapping picks by score, short leftovers, then the fallback phrases.
    """
    pool = _Pool(ranked=_rank(_dedupe(candidates)), short=_rank(_dedupe(short)), brands=brands)
    chosen: List[Candidate] = []
    for stage in SELECTION_STAGES:
        if len(chosen) >= TAGLINE_COUNT:
            break
        stage(pool, chosen)
    return chosen[:TAGLINE_COUNT]


# ---------------------------
# Formatter
# ---------------------------
def finalize_phrase(phrase: str) -> str:
    words = normalize_whitespace(_NON_WORD.sub("", phrase or "")).split()[:MAX_WORDS]
    while len(words) < MIN_WORDS:
        # Chosen phrases always keep a letter or digit, so "value" only pads
        # input that arrives here already empty.
        words.append(words[-1] if words else "value")
    return " ".join(words)


def format_selection(phrases: Sequence[str]) -> str:
    joined = SEPARATOR.join(finalize_phrase(p) for p in phrases)
    return _NEWLINES.sub(" ", joined).strip()


def format_tagline(raw_text: str, brand_list_text: str = "") -> str:
    """Normalize a raw tagline reply into "phrase one / phrase two / phrase three"."""
    if not isinstance(raw_text, str):
        raw_text = "" if raw_text is None else str(raw_text)
    if not isinstance(brand_list_text, str):
        brand_list_text = "" if brand_list_text is None else str(brand_list_text)

    brands = brand_tokens(brand_list_text)
    kept, short = [], []
    for fragment in split_candidates(raw_text):
        candidate = filter_candidate(fragment, brands)
        if candidate:
            kept.append(candidate)
            continue
        leftover = strip_brands(fragment, brands)
        if leftover and _HAS_LETTER.search(leftover):
            short.append(leftover)

    chosen = select_candidates(kept, short, brands)
    return format_selection([c.display for c in chosen])
