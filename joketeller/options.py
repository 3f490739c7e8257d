# joketeller/options.py
"""Filter options understood by the JokeAPI.

Every member's value is the exact token the API expects on the wire, so
``str(Category.Christmas)`` and ``Category.Christmas.value`` both give
``"Christmas"``.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class _Token(str, Enum):
    def __str__(self) -> str:
        return self.value


class Category(_Token):
    Any = "Any"
    Programming = "Programming"
    Misc = "Misc"
    Dark = "Dark"
    Pun = "Pun"
    Spooky = "Spooky"
    Christmas = "Christmas"


# English is the API default, so it has no member
class Language(_Token):
    Czech = "cs"
    German = "de"
    Spanish = "es"
    French = "fr"
    Portuguese = "pt"


class BlacklistFlag(_Token):
    Nsfw = "nsfw"
    Religious = "religious"
    Political = "political"
    Racist = "racist"
    Sexist = "sexist"
    Explicit = "explicit"


# json is the default
class ResponseFormat(_Token):
    Xml = "xml"
    Yaml = "yaml"
    Txt = "txt"


class JokeType(_Token):
    Single = "single"
    TwoPart = "twopart"


class StatusCode(IntEnum):
    """HTTP statuses the JokeAPI documents. Informational only."""

    Ok = 200
    Created = 201
    BadRequest = 400
    Forbidden = 403
    NotFound = 404
    PayloadTooLarge = 413
    URITooLong = 414
    TooManyRequests = 429
    InternalServerError = 500
    OriginUnreachable = 523

    @classmethod
    def lookup(cls, code: Optional[int]) -> Optional["StatusCode"]:
        try:
            return cls(code)
        except ValueError:
            return None


def parse_option(enum_cls: Type[E], text: str) -> E:
    """
    Resolve an option from user input. Accepts the member name or the wire
    token, case-insensitively ('twopart', 'TwoPart', 'de', 'German').
    """
    key = (text or "").strip().lower()
    for member in enum_cls:
        if key in (member.name.lower(), str(member.value).lower()):
            return member
    choices = ", ".join(str(m.value) for m in enum_cls)
    raise ValueError(f"Invalid {enum_cls.__name__}: {text!r} (choose from: {choices})")
