"""Split raw names into tokens."""

import logging
import re
from dataclasses import dataclass, field

from .lexicon import SPLIT_PATTERN

logger = logging.getLogger(__name__)

_BRACKET_PATTERN = re.compile(r"\[(.*?)\]")
_SPLIT_PATTERN = re.compile(SPLIT_PATTERN)

# Online TV recorder names like "Show_Name_12.11.17_20-15_arte_..."
_RECORDING_PATTERN = re.compile(r"_\d{2}\.\d{2}\.\d{2}[_ ]+\d{2}-\d{2}_", re.ASCII)

# The recording timestamp must not be the beginning of the name
_RECORDING_MIN_OFFSET = 10


@dataclass
class TokenPool:
    """Tokens of a single name.

    Blanked tokens are replaced by an empty string, so positions stay stable.
    """

    tokens: list[str] = field(default_factory=list)
    bracket_tokens: list[str] = field(default_factory=list)
    residual: str = ""

    def blank(self, position: int) -> None:
        self.tokens[position] = ""


def split_tokens(text: str) -> list[str]:
    """Split on all name delimiters, dropping empty pieces."""
    return [token for token in _SPLIT_PATTERN.split(text) if token]


def strip_recording_suffix(text: str) -> str:
    """Cut a name at its recording timestamp, if there is one."""
    match = _RECORDING_PATTERN.search(text)
    if match and match.start() > _RECORDING_MIN_OFFSET:
        logger.debug(f"Recording timestamp: {match.group()}")
        return text[: match.start()]
    return text


def tokenize(text: str) -> TokenPool:
    """Tokenize a (pre-cleaned) name.

    [bracketed] groups are taken out first and only kept as side tokens,
    then a recording timestamp suffix is dropped, then the rest is split.

    Args:
        text: Name to tokenize

    Returns:
        TokenPool with main tokens, bracket tokens and the residual string
    """
    working = text or ""
    bracket_tokens: list[str] = []

    for match in _BRACKET_PATTERN.finditer(working):
        bracket_tokens.extend(split_tokens(match.group(1)))
        working = working.replace(match.group(), "")

    if bracket_tokens:
        logger.debug(f"Bracket tokens: {bracket_tokens}")

    working = strip_recording_suffix(working)

    tokens = split_tokens(working)
    if not tokens:
        tokens = list(bracket_tokens)

    return TokenPool(tokens=tokens, bracket_tokens=bracket_tokens, residual=working)
