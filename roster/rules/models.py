from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from roster.domain.entities import SocialMedia, coerce_social_media

OutputFormat = Literal["csv", "json", "lines"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class QueryRules(BaseModel):
    min_age: int = 35
    required_flag: SocialMedia = SocialMedia.TWITTER
    reference_date: date | None = None

    @field_validator("required_flag", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> SocialMedia | None:
        return coerce_social_media(value)


class OutputRules(BaseModel):
    format: OutputFormat = "lines"


class LoggingRules(BaseModel):
    level: LogLevel = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class RosterRules(BaseModel):
    query: QueryRules = Field(default_factory=QueryRules)
    output: OutputRules = Field(default_factory=OutputRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
