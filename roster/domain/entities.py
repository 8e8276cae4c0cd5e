import re
from datetime import date, datetime
from enum import STRICT, Flag, IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums / Flags ---


class Gender(IntEnum):
    FEMALE = 1
    MALE = 2
    NON_BINARY = 3


class SocialMedia(Flag, boundary=STRICT):
    """
    Social networks a person is known to use.

    Members are bit positions; any union of them is a valid value.
    Bits outside the declared members are rejected with ValueError.
    """

    TWITTER = 1
    FACEBOOK = 2
    INSTAGRAM = 4
    SNAPCHAT = 8
    LINKEDIN = 16

    # Named combinations
    FACEBOOK_AND_TWITTER = TWITTER | FACEBOOK
    ALL = TWITTER | FACEBOOK | INSTAGRAM | SNAPCHAT | LINKEDIN


class MissingBirthDateError(ValueError):
    """Raised when an age is requested for a person without a birth date."""


_MISTER = re.compile("mister", re.IGNORECASE)


def normalize_title(raw: str | None) -> str:
    """Replace every occurrence of "Mister" (any case) with "Mr."."""
    if raw is None:
        return ""
    return _MISTER.sub("Mr.", raw)


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def compute_age(birth_date: date | datetime, now: date | datetime) -> int:
    """
    Age in whole years on `now`.

    Compares day-of-year rather than month/day, so dates after Feb 29 in a
    leap year are shifted by one day relative to non-leap years.
    """
    born = _as_date(birth_date)
    today = _as_date(now)

    years = today.year - born.year
    has_had_birthday_this_year = today.timetuple().tm_yday >= born.timetuple().tm_yday
    if has_had_birthday_this_year:
        return years
    return years - 1


def parse_social_media(text: str) -> SocialMedia:
    """
    Parse "twitter|facebook" (or comma separated) into a SocialMedia value.

    Raises ValueError for unknown names.
    """
    result = SocialMedia(0)
    for part in re.split(r"[|,]", text):
        name = part.strip().upper()
        if not name:
            continue
        try:
            result |= SocialMedia[name]
        except KeyError as e:
            raise ValueError(f"Unknown social media flag: {part.strip()!r}") from e
    return result


def coerce_social_media(value: Any) -> SocialMedia | None:
    if value is None or isinstance(value, SocialMedia):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return SocialMedia(value)
    if isinstance(value, str):
        return parse_social_media(value)
    raise ValueError(f"Cannot interpret {value!r} as social media flags")


def has_flag(flags: SocialMedia | None, flag: SocialMedia) -> bool:
    """Membership test that treats an absent flag-set as having no flags."""
    if flags is None:
        return False
    return flag in flags


# --- Person ---


class Person(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    gender: Gender
    first_name: str = ""
    last_name: str = ""
    title: str = ""
    social_media: SocialMedia | None = None
    birth_date: date | None = None
    created: datetime = Field(default_factory=datetime.now)
    modified: datetime = Field(default_factory=datetime.now)

    def __init__(self, gender: Gender | int | None = None, /, **data: Any) -> None:
        if gender is not None:
            data["gender"] = gender
        super().__init__(**data)

    @field_validator("title", mode="before")
    @classmethod
    def _normalize_title(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return normalize_title(value)
        return value

    @field_validator("social_media", mode="before")
    @classmethod
    def _coerce_social_media(cls, value: Any) -> SocialMedia | None:
        return coerce_social_media(value)

    @property
    def full_name(self) -> str:
        return f"{self.title} {self.first_name} {self.last_name}"

    @property
    def age(self) -> int:
        """Age on the current wall-clock date."""
        return self.age_on(datetime.now())

    def age_on(self, now: date | datetime) -> int:
        if self.birth_date is None:
            raise MissingBirthDateError(f"{self.full_name.strip()!r} has no birth date")
        return compute_age(self.birth_date, now)

    def has_social_media(self, flag: SocialMedia) -> bool:
        return has_flag(self.social_media, flag)

    def add_social_media(self, *flags: SocialMedia) -> None:
        combined = self.social_media or SocialMedia(0)
        for flag in flags:
            combined |= flag
        self.social_media = combined

    def remove_social_media(self, *flags: SocialMedia) -> None:
        if self.social_media is None:
            return
        remaining = self.social_media
        for flag in flags:
            remaining &= ~flag
        self.social_media = remaining
