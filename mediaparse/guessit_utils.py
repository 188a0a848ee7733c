"""Season/episode detection for episode files, backed by guessit."""

import logging
from collections.abc import Iterable

import guessit

from .episode_utils import strip_tv_stopwords
from .models import UNKNOWN_SEASON, EpisodeData

logger = logging.getLogger(__name__)


def _as_int_list(value) -> list[int]:
    """Convert a guessit number or list of numbers to a sorted list of ints."""
    if value is None:
        return []
    values = value if isinstance(value, list) else [value]
    return sorted({int(item) for item in values})


def _as_season(value) -> int:
    seasons = _as_int_list(value)
    # multi-season files like S01-S03 have no single season
    if len(seasons) != 1:
        return UNKNOWN_SEASON
    return seasons[0]


def _as_text(value) -> str | None:
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(str(item) for item in value) or None
    return str(value)


def detect_episode(
    filename: str | None,
    show_name: str | None = None,
    bad_words: Iterable[str] = (),
) -> EpisodeData:
    """
    Detect season and episode numbers of an episode file.

    Stopwords and bad words are removed before guessit sees the name, a known
    show name is passed to guessit as expected title.
    Returns an EpisodeData with season -1 if nothing could be detected.
    """
    if not filename:
        return EpisodeData()

    cleaned = strip_tv_stopwords(filename, bad_words)
    options: dict = {"type": "episode"}
    if show_name:
        options["expected_title"] = [show_name]

    try:
        guessit_dict = dict(guessit.guessit(cleaned, options))
    except Exception as e:
        logger.warning(f"Guessit failed for {filename}: {e}")
        return EpisodeData()

    try:
        return EpisodeData(
            season=_as_season(guessit_dict.get("season")),
            episodes=_as_int_list(guessit_dict.get("episode")),
            title=_as_text(guessit_dict.get("title")),
            episode_title=_as_text(guessit_dict.get("episode_title")),
        )
    except (TypeError, ValueError) as e:
        logger.warning(f"EpisodeData validation failed for {filename}: {e}")
        return EpisodeData()
