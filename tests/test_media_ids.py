"""Tests for embedded id detection."""

from mediaparse.media_ids import (
    detect_ids,
    detect_imdb_id,
    detect_tmdb_id,
    detect_tvdb_id,
    is_valid_imdb_id,
)


def test_is_valid_imdb_id():
    assert is_valid_imdb_id("tt1234567")
    assert is_valid_imdb_id("tt123456")
    assert is_valid_imdb_id("tt12345678")
    assert not is_valid_imdb_id("1234567")
    assert not is_valid_imdb_id("tt12345")
    assert not is_valid_imdb_id("xtt1234567")
    assert not is_valid_imdb_id("tt1234567x")
    assert not is_valid_imdb_id("")
    assert not is_valid_imdb_id(None)


def test_detect_imdb_id():
    assert detect_imdb_id("this is my [tt0123456] movie (2009)") == "tt0123456"
    assert detect_imdb_id("<id>tt0499549</id><id>tt0000001</id>") == "tt0499549"
    assert detect_imdb_id("https://www.imdb.com/Title?0499549") == "tt0499549"
    assert detect_imdb_id("no id in here") == ""
    assert detect_imdb_id("") == ""
    assert detect_imdb_id(None) == ""


def test_detect_tmdb_id():
    assert detect_tmdb_id("Avatar (tmdb-19995).mkv") == 19995
    assert detect_tmdb_id("Avatar [TMDBID=19995]") == 0
    assert detect_tmdb_id("Avatar tmdbid-19995") == 19995
    assert detect_tmdb_id("Avatar.tmdb19995") == 19995
    assert detect_tmdb_id("https://www.themoviedb.org/movie/19995-avatar") == 19995
    assert detect_tmdb_id("https://www.themoviedb.org/tv/1399") == 1399
    assert detect_tmdb_id("Avatar.2009.mkv") == 0
    assert detect_tmdb_id(None) == 0


def test_detect_tmdb_id_out_of_range():
    """Test that ids which are no valid TMDB ids are ignored."""
    assert detect_tmdb_id("tmdb-99999999999") == 0


def test_detect_tvdb_id():
    assert detect_tvdb_id("Breaking Bad [tvdbid-81189]") == "81189"
    assert detect_tvdb_id("Breaking Bad TVDB 81189") == "81189"
    assert detect_tvdb_id("https://thetvdb.com/series/81189") == "81189"
    assert detect_tvdb_id("https://thetvdb.com/movies/123") == "123"
    assert detect_tvdb_id("Breaking Bad") == ""
    assert detect_tvdb_id(None) == ""


def test_detect_ids():
    ids = detect_ids("Avatar (2009) tt0499549 tmdb-19995")

    assert ids == {"imdb": "tt0499549", "tmdb": 19995}


def test_detect_ids_nothing_found():
    assert detect_ids("Avatar (2009)") == {}
    assert detect_ids(None) == {}
