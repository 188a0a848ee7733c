"""Pick the cleanest of several names for the same item."""

import logging
import re
from collections.abc import Callable, Iterable

from whenever import Instant

from .models import ParserCandidate
from .title_parser import segment

logger = logging.getLogger(__name__)

_CAMEL_CASE_PATTERN = re.compile(r"[A-Z][a-z]")
_WORD_SEPARATOR_PATTERN = re.compile(" ")
_OTHER_SEPARATOR_PATTERN = re.compile(r"[_.-]")

# Lower than any possible rating
_WORST_RATE = -10000


def _count_pieces(pattern: re.Pattern, text: str) -> int:
    """Count the pieces of a split, not counting trailing empty pieces."""
    if not text:
        return 1
    pieces = pattern.split(text)
    while pieces and not pieces[-1]:
        pieces.pop()
    return len(pieces)


def create_candidate(
    name: str,
    bad_words: Iterable[str] = (),
    now_func: Callable[[], Instant] = Instant.now,
) -> ParserCandidate:
    """Parse a raw name into a ParserCandidate."""
    original = (name or "").strip()
    result = segment(original, bad_words, now_func)
    return ParserCandidate(original=original, clean=result.title, year=result.year)


def rate_cleanness(candidate: ParserCandidate) -> int:
    """Rate how "clean" a parsed name is.

    CamelCase names with spaces as delimiter and a year rate higher,
    non-space separators and long names rate lower.

    The cleaned percentage is int(100 - len(clean) * 100 / len(original)),
    truncated as a whole. This is one higher than 100 - floor(len(clean) * 100
    / len(original)) whenever the ratio is not a whole number.

    Args:
        candidate: The candidate to rate

    Returns:
        The rating, the higher the better; -1 if nothing clean is left
    """
    clean = candidate.clean
    if not clean:
        return -1

    words = _count_pieces(_WORD_SEPARATOR_PATTERN, clean)
    seps = _count_pieces(_OTHER_SEPARATOR_PATTERN, clean) - 1
    cleaned = int(100 - len(clean) * 100 / len(candidate.original))
    camel_case = len(_CAMEL_CASE_PATTERN.findall(clean))

    rate = camel_case * 20 + (10 - words * 2) * 2 - seps * 20 - len(clean) * 2 + cleaned
    if candidate.year:
        rate += 20

    logger.debug(
        f"{candidate} - Rate:{rate} PERC:{cleaned} LEN:{len(clean)} "
        f"WRD:{words} CC:{camel_case} SEP:{seps}"
    )
    return rate


def pick_cleanest(
    bad_words: Iterable[str],
    candidates: Iterable[str],
    now_func: Callable[[], Instant] = Instant.now,
) -> ParserCandidate | None:
    """Return the cleanest of all candidate names.

    Ties keep the first candidate.

    Args:
        bad_words: Regular expressions to remove from every name
        candidates: Raw names for the same item (folder name, file name, ...)
        now_func: Clock used for the upper year limit

    Returns:
        The best rated ParserCandidate, or None without candidates
    """
    bad_words = list(bad_words or ())
    best = None
    best_rate = _WORST_RATE

    for name in candidates:
        candidate = create_candidate(name, bad_words, now_func)
        rate = rate_cleanness(candidate)
        if rate > best_rate:
            best = candidate
            best_rate = rate

    return best
