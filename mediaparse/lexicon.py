"""Constant word tables used to clean release names.

Everything in this module is immutable and shared by all callers.
"""

# Regex character class of name delimiters
DELIMITER = r"[\[\](){} _,.-]"

# Characters a name is split on (the delimiter class plus backslash)
SPLIT_PATTERN = r"[\[\](){} _,.\\-]+"

# Hard stopwords are always cleaned, regardless of their position
HARD_STOPWORDS: tuple[str, ...] = (
    "1080", "1080i", "1080p", "2160p", "2160i", "3d", "480i", "480p", "576i",
    "576p", "360p", "10bit", "12bit", "360i", "720", "720i", "720p", "8bit",
    "ac3", "ac3ld", "ac3d", "ac3md", "amzn", "aoe", "atmos", "avc", "bd5",
    "bdrip", "blueray", "bluray", "brrip", "cam", "cd1", "cd2", "cd3", "cd4",
    "cd5", "cd6", "cd7", "cd8", "cd9", "dd20", "dd51", "disc1", "disc2",
    "disc3", "disc4", "disc5", "disc6", "disc7", "disc8", "disc9", "divx",
    "divx5", "dl", "dsr", "dsrip", "dts", "dtv", "dubbed", "dvd", "dvd1",
    "dvd2", "dvd3", "dvd4", "dvd5", "dvd6", "dvd7", "dvd8", "dvd9", "dvdivx",
    "dvdrip", "dvdscr", "dvdscreener", "emule", "etm", "fs", "fps", "h264",
    "h265", "hd", "hddvd", "hdr", "hdr10", "hdr10+", "hdrip", "hdtv",
    "hdtvrip", "hevc", "hrhd", "hrhdtv", "ind", "ituneshd", "ld", "md",
    "microhd", "multisubs", "mp3", "netflixhd", "nfo", "nfofix", "ntg", "ntsc",
    "ogg", "ogm", "pal", "pdtv", "pso", "r3", "r5", "remastered", "repack",
    "rerip", "remux", "roor", "rs", "rsvcd", "screener", "sd", "subbed",
    "subs", "svcd", "tc", "telecine", "telesync", "ts", "truehd", "uhd",
    "uncut", "unrated", "vcf", "vhs", "vhsrip", "webdl", "webrip",
    "workprint", "ws", "x264", "x265", "xf", "xvid", "xvidvd",
)

# Soft stopwords may occur before the year token and are only cleaned
# from the year position onwards
SOFT_STOPWORDS: tuple[str, ...] = (
    "complete", "custom", "dc", "docu", "doku", "extended", "fragment",
    "internal", "limited", "local", "ma", "multi", "pal", "proper", "read",
    "retail", "se", "www", "xxx",
)

# Regex fragments removed before splitting (only when preceded by a delimiter)
CLEANWORDS: tuple[str, ...] = (
    r"24\.000", r"23\.976", r"23\.98", r"24\.00", r"web\-dl", r"web\-rip",
    r"blue\-ray", r"blu\-ray", r"dvd\-rip",
)

ROMAN_NUMERALS: frozenset[str] = frozenset(
    {"I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X"}
)

_HARD_STOPWORD_SET = frozenset(HARD_STOPWORDS)
_SOFT_STOPWORD_SET = frozenset(SOFT_STOPWORDS)

# The first tokens of a name are never cut off by a stopword
MIN_STOPWORD_POSITION = 2


def is_hard_stopword(token: str) -> bool:
    return token.lower() in _HARD_STOPWORD_SET


def is_soft_stopword(token: str) -> bool:
    return token.lower() in _SOFT_STOPWORD_SET


def lower_stopword_position(current: int, position: int) -> int:
    """Return the new earliest stopword position after a match at `position`.

    The boundary only moves towards the front, and never below
    MIN_STOPWORD_POSITION, so a short title like "Safety divx Not Guaranteed"
    keeps its words after the early stopword.

    Args:
        current: Current earliest stopword position
        position: Token position of the new stopword match

    Returns:
        The (possibly unchanged) earliest stopword position
    """
    if position < current and position >= MIN_STOPWORD_POSITION:
        return position
    return current


def normalize_roman_numeral(token: str) -> str:
    """Upper-case bare roman numerals ("Part Iv" -> "Part IV"), keep others 1:1."""
    upper = token.upper()
    if upper in ROMAN_NUMERALS:
        return upper
    return token
