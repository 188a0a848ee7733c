"""Tests for guessit based season/episode detection."""

from unittest.mock import patch

from mediaparse.guessit_utils import detect_episode
from mediaparse.models import UNKNOWN_SEASON, EpisodeData


def test_detect_episode_basic():
    """Test basic episode detection."""
    result = detect_episode("Show.Name.S02E05.720p.HDTV.x264-GROUP.mkv")

    assert isinstance(result, EpisodeData)
    assert result.season == 2
    assert result.episodes == [5]


def test_detect_episode_empty_filename():
    result = detect_episode("")

    assert result == EpisodeData()
    assert result.season == UNKNOWN_SEASON


def test_detect_episode_none_filename():
    result = detect_episode(None)

    assert result.season == -1
    assert result.episodes == []


def test_detect_episode_strips_stopwords_first():
    """Test that guessit gets the cleaned name and the show name."""
    with patch("mediaparse.guessit_utils.guessit.guessit") as mock_guessit:
        mock_guessit.return_value = {"title": "Show", "season": 1, "episode": 2}

        detect_episode("Show.S01E02.720p.mkv", show_name="Show")

        mock_guessit.assert_called_once_with(
            "Show.S01E02 .mkv", {"type": "episode", "expected_title": ["Show"]}
        )


def test_detect_episode_without_season():
    """Test that a missing season is -1, never 0 or None."""
    with patch("mediaparse.guessit_utils.guessit.guessit") as mock_guessit:
        mock_guessit.return_value = {"title": "Test Anime", "episode": 12}

        result = detect_episode("[TestGroup] Test Anime - 12.mkv")

        assert result.season == -1
        assert result.episodes == [12]
        assert result.title == "Test Anime"


def test_detect_episode_multi_episode():
    with patch("mediaparse.guessit_utils.guessit.guessit") as mock_guessit:
        mock_guessit.return_value = {
            "title": "Show",
            "season": [1],
            "episode": [3, 2],
            "episode_title": "Pilot",
        }

        result = detect_episode("Show.S01E02E03.mkv")

        assert result.season == 1
        assert result.episodes == [2, 3]
        assert result.episode_title == "Pilot"


def test_detect_episode_multi_season():
    with patch("mediaparse.guessit_utils.guessit.guessit") as mock_guessit:
        mock_guessit.return_value = {"title": "Show", "season": [1, 2, 3]}

        result = detect_episode("Show.S01-S03.mkv")

        assert result.season == -1
        assert result.episodes == []


def test_detect_episode_exception_handling():
    with patch("mediaparse.guessit_utils.guessit.guessit") as mock_guessit:
        mock_guessit.side_effect = Exception("Guessit error")

        result = detect_episode("Show.S01E02.mkv")

        assert result == EpisodeData()


def test_detect_episode_validation_error():
    with patch("mediaparse.guessit_utils.guessit.guessit") as mock_guessit:
        mock_guessit.return_value = {"title": "Show", "episode": "invalid_episode"}

        result = detect_episode("Show.S01E02.mkv")

        assert result == EpisodeData()
