"""Tests for the TV episode stopword stripper."""

import logging

from mediaparse.episode_utils import get_extension, strip_tv_stopwords


def test_strip_tv_stopwords_release_name():
    result = strip_tv_stopwords("Show.S01E01.720p.HDTV.x264-GROUP.mkv")

    assert result == "Show.S01E01 GROUP.mkv"


def test_strip_tv_stopwords_needs_both_bounds():
    """Test that stopwords inside words are kept."""
    assert strip_tv_stopwords("Hdtvshow.S01E01.mkv") == "Hdtvshow.S01E01.mkv"
    assert strip_tv_stopwords("Cats.S01E01.mkv") == "Cats.S01E01.mkv"


def test_strip_tv_stopwords_at_start():
    assert strip_tv_stopwords("720p.Show.S01E01.mkv") == " Show.S01E01.mkv"


def test_strip_tv_stopwords_keeps_dvd_folders():
    assert strip_tv_stopwords("VIDEO_TS.IFO") == "VIDEO_TS.IFO"
    assert strip_tv_stopwords("AUDIO_TS") == "AUDIO_TS"


def test_strip_tv_stopwords_other_ts_suffix():
    assert strip_tv_stopwords("Show_TS.mkv") == "Show .mkv"


def test_strip_tv_stopwords_repeated_word():
    assert strip_tv_stopwords("Show.S01E02.1080p.1080p.mkv") == "Show.S01E02 .mkv"


def test_strip_tv_stopwords_resolution():
    assert strip_tv_stopwords("Show.1920x1080.S01E01.mkv") == "Show S01E01.mkv"


def test_strip_tv_stopwords_without_extension():
    assert strip_tv_stopwords("Show S01E01 720p") == "Show S01E01 "


def test_strip_tv_stopwords_bad_words():
    assert strip_tv_stopwords("tvs-castle-s01e01.avi", ["tvs"]) == " castle-s01e01.avi"
    assert strip_tv_stopwords("castle-top100-s01e01.avi", [r"top\d+"]) == "castle s01e01.avi"


def test_strip_tv_stopwords_bad_words_need_both_bounds():
    assert strip_tv_stopwords("castle-s01e01.avi", ["cast"]) == "castle-s01e01.avi"


def test_strip_tv_stopwords_invalid_bad_word(caplog):
    with caplog.at_level(logging.WARNING):
        result = strip_tv_stopwords("tvs-castle-s01e01.avi", ["[", "tvs"])

    assert result == " castle-s01e01.avi"
    assert "Skipping invalid bad word" in caplog.text


def test_strip_tv_stopwords_empty():
    assert strip_tv_stopwords("") == ""


def test_get_extension():
    assert get_extension("Show.S01E01.mkv") == "mkv"
    assert get_extension("Show S01E01") == ""
    assert get_extension("Season.1/Show S01E01") == ""
    assert get_extension("Season.1\\Show S01E01") == ""
    assert get_extension("Show.") == ""
