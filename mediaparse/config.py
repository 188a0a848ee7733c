from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration settings for mediaparse."""

    # Bad words (regular expressions)
    bad_words: list[str] = Field(
        default_factory=list,
        description="Regular expressions removed from movie/folder names",
    )
    tv_bad_words: list[str] = Field(
        default_factory=list,
        description="Regular expressions removed from episode names",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    class Config:
        env_prefix = "MEDIAPARSE_"
        case_sensitive = False


settings = Settings()
