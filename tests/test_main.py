"""Tests for the command line interface."""

import json

import pytest

from mediaparse.main import build_parser, main


def run(capsys, *argv):
    assert main(list(argv)) == 0
    return json.loads(capsys.readouterr().out)


def test_title_command(capsys):
    output = run(capsys, "title", "MOVIE.2020.1080p", "Movie (2020)")

    assert output["best"] == {"original": "Movie (2020)", "clean": "Movie", "year": "2020"}
    assert [candidate["rate"] for candidate in output["candidates"]] == [94, 104]


def test_title_command_bad_word(capsys):
    output = run(capsys, "title", "tvs-castle-dl-ituneshd-xvid-101.avi", "--bad-word", "tvs")

    assert output["best"]["clean"] == "castle"


def test_ids_command(capsys):
    output = run(capsys, "ids", "Avatar (2009) tt0499549 tmdb-19995")

    assert output == {"imdb": "tt0499549", "tmdb": 19995}


def test_language_command(capsys):
    output = run(capsys, "language", "movie.German")

    assert output == {"alias": "german", "iso3": "deu"}


def test_episode_command(capsys):
    output = run(capsys, "episode", "Show.Name.S02E05.720p.HDTV.x264-GROUP.mkv")

    assert output["season"] == 2
    assert output["episodes"] == [5]


def test_missing_command():
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args([])

    assert exc_info.value.code == 2
