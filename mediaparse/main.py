import argparse
import json
import logging
import sys

from .cleanliness import create_candidate, pick_cleanest, rate_cleanness
from .config import settings
from .guessit_utils import detect_episode
from .languages import find_language_in_string, get_iso3_language_from_localized_string
from .media_ids import detect_ids

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_title(args: argparse.Namespace) -> int:
    """Parse all names and report the cleanest one."""
    bad_words = settings.bad_words + (args.bad_word or [])

    candidates = []
    for name in args.names:
        candidate = create_candidate(name, bad_words)
        candidates.append({**candidate.model_dump(), "rate": rate_cleanness(candidate)})

    best = pick_cleanest(bad_words, args.names)
    _print_json(
        {
            "best": best.model_dump() if best else None,
            "candidates": candidates,
        }
    )
    return 0


def cmd_ids(args: argparse.Namespace) -> int:
    _print_json(detect_ids(args.text))
    return 0


def cmd_language(args: argparse.Namespace) -> int:
    alias = find_language_in_string(args.text)
    _print_json(
        {
            "alias": alias,
            "iso3": get_iso3_language_from_localized_string(alias) if alias else "",
        }
    )
    return 0


def cmd_episode(args: argparse.Namespace) -> int:
    bad_words = settings.tv_bad_words + (args.bad_word or [])
    episode = detect_episode(args.filename, show_name=args.show, bad_words=bad_words)
    _print_json(episode.model_dump())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mediaparse",
        description="Extract clean titles, years, ids and languages from media file names",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    title_parser = subparsers.add_parser(
        "title", help="Detect title and year, pick the cleanest of several names"
    )
    title_parser.add_argument("names", nargs="+", help="File or folder names")
    title_parser.add_argument(
        "--bad-word", action="append", help="Additional bad word regex (repeatable)"
    )
    title_parser.set_defaults(func=cmd_title)

    ids_parser = subparsers.add_parser("ids", help="Detect IMDb/TMDB/TVDB ids")
    ids_parser.add_argument("text", help="Name, URL or NFO text")
    ids_parser.set_defaults(func=cmd_ids)

    language_parser = subparsers.add_parser("language", help="Detect a trailing language tag")
    language_parser.add_argument("text", help="Name to check, e.g. 'movie.de'")
    language_parser.set_defaults(func=cmd_language)

    episode_parser = subparsers.add_parser("episode", help="Detect season and episode")
    episode_parser.add_argument("filename", help="Episode file name")
    episode_parser.add_argument("--show", help="Known show name")
    episode_parser.add_argument(
        "--bad-word", action="append", help="Additional bad word regex (repeatable)"
    )
    episode_parser.set_defaults(func=cmd_episode)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    args = build_parser().parse_args(argv)
    logger.debug(f"Running command: {args.command}")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
