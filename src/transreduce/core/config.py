import os
import typing as tp

from pydantic import BaseModel, Field, field_validator

from transreduce.functional.words import DEFAULT_SEPARATOR, DEFAULT_WORDS
from transreduce.logger.logger import LOG_LEVELS


class Settings(BaseModel):
    SEPARATOR: str = DEFAULT_SEPARATOR
    WORDS: tp.List[str] = Field(default_factory=lambda: list(DEFAULT_WORDS))
    PERIOD_MS: int = Field(default=500, gt=0)
    TOTAL_DURATION_S: int = Field(default=3600, ge=0)
    LOG_LEVEL: str = "INFO"

    @field_validator("WORDS", mode="before")
    @classmethod
    def split_words(cls, value: tp.Any) -> tp.Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            return [w.strip() for w in value if isinstance(w, str) and w.strip()]
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got {value!r}.")
        return level

    @classmethod
    def load(cls, environ: tp.Optional[tp.Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        mapping = {
            "SEPARATOR": "TRANSREDUCE_SEPARATOR",
            "WORDS": "TRANSREDUCE_WORDS",
            "PERIOD_MS": "TRANSREDUCE_PERIOD_MS",
            "TOTAL_DURATION_S": "TRANSREDUCE_TOTAL_DURATION_S",
            "LOG_LEVEL": "LOG_LEVEL",
        }
        values = {
            field: environ[var] for field, var in mapping.items() if var in environ
        }
        return cls(**values)
