"""Language related helpers: detect language tags at the end of names.

The alias table maps every known spelling of a language (ISO codes, English
and localized names, locale tags) to a LanguageEntry. It is built lazily
once per process and is read-only afterwards.
"""

import logging
import re
import threading
from collections.abc import Mapping
from types import MappingProxyType

from babel import Locale, UnknownLocaleError, localedata
from babelfish import LANGUAGE_MATRIX

from .models import LanguageEntry

logger = logging.getLogger(__name__)

# "Part II" is no language, although "ii" is a valid ISO code
_PART_PATTERN = re.compile(r"Part [Ii]+", re.IGNORECASE)
_LANGUAGE_DELIMITERS = " _.-"

# Special ISO 639-2 codes
_SPECIAL_CODES = {
    "mis": "Uncoded languages",
    "mul": "Multiple languages",
    "und": "Undetermined",
    "zxx": "No linguistic content",
}
_BRAZILIAN_PORTUGUESE = LanguageEntry(
    tag="pt-BR", alpha2="pb", alpha3="pob", alpha3b="pob", english_name="Portuguese"
)
_BRAZILIAN_PORTUGUESE_KEYS = ("pb", "pob", "ptb", "pt-br")

_table_lock = threading.Lock()
_language_table: Mapping[str, LanguageEntry] | None = None


def _display_names(code: str) -> Mapping[str, str]:
    try:
        return Locale.parse(code).languages
    except (UnknownLocaleError, ValueError):
        return {}


def _build_entries() -> tuple[dict[str, LanguageEntry], dict[str, LanguageEntry]]:
    """Create entries for all ISO 639-1 languages, keyed by alpha2 and alpha3."""
    english = _display_names("en")
    by_alpha2: dict[str, LanguageEntry] = {}
    by_alpha3: dict[str, LanguageEntry] = {}

    for row in LANGUAGE_MATRIX:
        alpha3 = row.alpha3t or row.alpha3
        entry = LanguageEntry(
            tag=row.alpha2 or row.alpha3,
            alpha2=row.alpha2,
            alpha3=alpha3,
            alpha3b=row.alpha3b or alpha3,
            english_name=english.get(row.alpha2 or row.alpha3) or row.name,
        )
        if row.alpha2:
            by_alpha2[row.alpha2] = entry
        by_alpha3[row.alpha3] = entry

    return by_alpha2, by_alpha3


def _build_language_table() -> dict[str, LanguageEntry]:
    by_alpha2, by_alpha3 = _build_entries()
    aliases: dict[str, LanguageEntry] = {}

    display_locales = {
        code: _display_names(code) for code in sorted(by_alpha2) if localedata.exists(code)
    }

    for alpha2 in sorted(by_alpha2):
        entry = by_alpha2[alpha2]

        # ISO codes always have priority
        aliases[entry.alpha3] = entry
        aliases[entry.alpha3b] = entry
        aliases[alpha2] = entry

        english_name = entry.english_name.lower()
        aliases.setdefault(english_name, entry)
        # eg German -> ger, where iso3 is deu
        aliases.setdefault(english_name[:3], entry)

        for names in display_locales.values():
            name = names.get(alpha2)
            if name:
                aliases.setdefault(name.lower(), entry)

    for code, english_name in _SPECIAL_CODES.items():
        aliases[code] = LanguageEntry(
            tag=code, alpha2="", alpha3=code, alpha3b=code, english_name=english_name
        )

    for key in _BRAZILIAN_PORTUGUESE_KEYS:
        aliases[key] = _BRAZILIAN_PORTUGUESE

    # language tags of all known locales (de-at, sr-latn-ba, ...)
    for identifier in localedata.locale_identifiers():
        base = identifier.split("_")[0]
        entry = by_alpha2.get(base) or by_alpha3.get(base)
        if entry is not None:
            aliases.setdefault(identifier.replace("_", "-").lower(), entry)

    # longest keys first, so "pt-br" wins over "br"
    return {
        key: aliases[key]
        for key in sorted(aliases, key=lambda key: (-len(key), key))
        if key
    }


def get_language_table() -> Mapping[str, LanguageEntry]:
    """Return the process-wide alias table, building it on first use."""
    global _language_table

    if _language_table is None:
        with _table_lock:
            if _language_table is None:
                table = _build_language_table()
                logger.debug(f"Built language table with {len(table)} aliases")
                _language_table = MappingProxyType(table)
    return _language_table


def _lookup(text: str | None) -> LanguageEntry | None:
    if not text:
        return None
    return get_language_table().get(text.lower())


def does_string_end_with_language(text: str, language: str) -> bool:
    """Check whether the text equals or ends with the language.

    A language at the end must be preceded by one of " _.-".
    """
    text = text.lower()
    language = language.lower()
    if text == language:
        return True
    if not language or len(text) <= len(language) or not text.endswith(language):
        return False
    return text[-len(language) - 1] in _LANGUAGE_DELIMITERS


def find_language_in_string(text: str | None) -> str:
    """Find a language tag at the end of a string.

    Args:
        text: The string to parse, e.g. "movie.de" or "English / German"

    Returns:
        The matching alias from the language table or an empty string
    """
    if not text or not text.strip():
        return ""

    text = _PART_PATTERN.sub("", text)
    # possibly "de / en" - just take the first one
    parts = [part for part in text.split("/") if part]
    if not parts:
        return ""
    text = parts[0].strip()

    for alias in get_language_table():
        if does_string_end_with_language(text, alias):
            return alias
    return ""


def parse_language_from_string(text: str | None) -> str:
    """Parse the language from a string and return its ISO 639-2/T code."""
    alias = find_language_in_string(text)
    if alias:
        return get_iso3_language_from_localized_string(alias)
    return ""


def get_iso3_language_from_localized_string(text: str | None) -> str:
    """Get the ISO 639-2/T code for a language name or code, or an empty string."""
    entry = _lookup(text)
    return entry.alpha3 if entry else ""


def get_iso3b_language_from_localized_string(text: str | None) -> str:
    """Get the ISO 639-2/B code for a language name or code, or an empty string."""
    entry = _lookup(text)
    return entry.alpha3b if entry else ""


def get_iso2_language_from_localized_string(text: str | None) -> str:
    """Get the ISO 639-1 code for a language name or code, or an empty string."""
    entry = _lookup(text)
    return entry.alpha2 if entry else ""


def get_english_language_name_from_localized_string(text: str | None) -> str:
    entry = _lookup(text)
    return entry.english_name if entry else ""
