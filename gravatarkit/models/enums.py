"""Enum types for avatar options."""

from enum import Enum


class DefaultImage(str, Enum):
    """Image served when no avatar matches the email digest."""

    GRAVATAR_LOGO = ""
    NONE = "404"
    MYSTERY_MAN = "mm"
    IDENTICON = "identicon"
    MONSTER_ID = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"

    @classmethod
    def from_param(cls, raw: str) -> "DefaultImage":
        """Parse a query token (``mm``) or member name (``mystery_man``)."""
        return _parse(cls, raw)


class Rating(str, Enum):
    """Highest content rating an avatar may carry and still be shown."""

    DEFAULT = ""
    G = "g"
    PG = "pg"
    R = "r"
    X = "x"

    @classmethod
    def from_param(cls, raw: str) -> "Rating":
        """Parse a query token (``pg``) or member name (``PG``)."""
        return _parse(cls, raw)


def _parse(enum_cls, raw: str):
    value = raw.strip()
    for member in enum_cls:
        if value.lower() == member.value or value.upper() == member.name:
            return member
    raise ValueError(f"Unknown {enum_cls.__name__} value: {raw!r}")
