"""Detect IMDb, TMDB and TVDB ids embedded in names, NFOs and URLs."""

import logging
import re

logger = logging.getLogger(__name__)

_IMDB_ID_PATTERN = re.compile(r"tt\d{6,}", re.ASCII)
_IMDB_SEARCH_PATTERN = re.compile(r"(tt\d{6,})", re.ASCII)
_IMDB_URL_PATTERN = re.compile(r"imdb\.com/Title\?(\d{6,})", re.ASCII)

_TMDB_ID_PATTERN = re.compile(r"(tmdbid|tmdb)[ ._-]?(\d+)", re.IGNORECASE | re.ASCII)
_TMDB_URL_PATTERN = re.compile(r"themoviedb\.org/(?:movie|tv)/(\d+)", re.ASCII)

_TVDB_ID_PATTERN = re.compile(r"(tvdbid|tvdb)[ ._-]?(\d+)", re.IGNORECASE | re.ASCII)
_TVDB_URL_PATTERN = re.compile(r"thetvdb\.com/(?:movies|series)/(\d+)", re.ASCII)

# TMDB ids are signed 32 bit integers
_MAX_TMDB_ID = 2**31 - 1


def _first_group(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else ""


def _parse_tmdb_id(value: str) -> int:
    if not value:
        return 0
    tmdb_id = int(value)
    if tmdb_id > _MAX_TMDB_ID:
        logger.debug(f"Could not parse TMDB id - '{value}'")
        return 0
    return tmdb_id


def is_valid_imdb_id(imdb_id: str | None) -> bool:
    """Check whether the whole string is an IMDb id (tt + at least 6 digits)."""
    if not imdb_id or not imdb_id.strip():
        return False
    return _IMDB_ID_PATTERN.fullmatch(imdb_id) is not None


def detect_imdb_id(text: str | None) -> str:
    """Get the IMDb id out of a text.

    Args:
        text: File name, NFO content or URL

    Returns:
        The IMDb id ("tt0123456") or an empty string
    """
    if not text or not text.strip():
        return ""

    imdb_id = _first_group(_IMDB_SEARCH_PATTERN, text)
    if not imdb_id:
        url_id = _first_group(_IMDB_URL_PATTERN, text)
        if url_id:
            imdb_id = "tt" + url_id
    return imdb_id


def detect_tmdb_id(text: str | None) -> int:
    """Get the TMDB id out of a text (in the form tmdb-xxxxx or a themoviedb.org URL).

    Args:
        text: File name, NFO content or URL

    Returns:
        The TMDB id or 0
    """
    if not text or not text.strip():
        return 0

    match = _TMDB_ID_PATTERN.search(text)
    if match:
        return _parse_tmdb_id(match.group(2))
    return _parse_tmdb_id(_first_group(_TMDB_URL_PATTERN, text))


def detect_tvdb_id(text: str | None) -> str:
    """Get the TVDB id out of a text (in the form tvdb-xxxxx or a thetvdb.com URL).

    Args:
        text: File name, NFO content or URL

    Returns:
        The TVDB id or an empty string
    """
    if not text or not text.strip():
        return ""

    match = _TVDB_ID_PATTERN.search(text)
    if match:
        return match.group(2)
    return _first_group(_TVDB_URL_PATTERN, text)


def detect_ids(text: str | None) -> dict[str, str | int]:
    """Collect all ids found in a text into an id map.

    Only ids which were actually found are part of the result.
    """
    ids: dict[str, str | int] = {}

    imdb_id = detect_imdb_id(text)
    if imdb_id:
        ids["imdb"] = imdb_id

    tmdb_id = detect_tmdb_id(text)
    if tmdb_id > 0:
        ids["tmdb"] = tmdb_id

    tvdb_id = detect_tvdb_id(text)
    if tvdb_id:
        ids["tvdb"] = tvdb_id

    return ids
