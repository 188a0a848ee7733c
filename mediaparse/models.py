"""Pydantic models for mediaparse results."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# Downstream consumers always use -1 for an unknown season
UNKNOWN_SEASON = -1


class IdentityResult(BaseModel):
    """Clean title and release year extracted from a name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = ""
    year: str = ""  # empty when unknown


class ParserCandidate(BaseModel):
    """A raw candidate string paired with its parsed title and year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    original: str
    clean: str = ""
    year: str = ""

    def __str__(self) -> str:
        return f"{self.clean} ({self.year})"


class EpisodeData(BaseModel):
    """Season/episode information for a TV episode file."""

    model_config = ConfigDict(extra="forbid")

    season: int = UNKNOWN_SEASON
    episodes: list[int] = Field(default_factory=list)
    title: str | None = None
    episode_title: str | None = None


class LanguageEntry(NamedTuple):
    """A language known to the alias table."""

    tag: str  # IETF style tag, e.g. "de" or "pt-BR"
    alpha2: str
    alpha3: str  # ISO 639-2/T
    alpha3b: str  # ISO 639-2/B
    english_name: str
