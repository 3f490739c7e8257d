# joketeller/joker.py
"""Request builder for the JokeAPI.

A ``Joker`` collects filter selections through chainable setters and turns
them into a single query URL:

    joker = Joker()
    joker.add_categories([Category.Programming, Category.Pun]).set_amount(3)
    joker.build_url()
    # 'https://v2.jokeapi.dev/joke/Programming,Pun?amount=3'

A ``Joker`` is not meant to be shared between threads; use one per request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, TypeVar

from . import api
from .config import get_settings, normalize_base_url
from .options import BlacklistFlag, Category, JokeType, Language, ResponseFormat

T = TypeVar("T", bound=Hashable)


def dedup(items: Iterable[T]) -> List[T]:
    """Drop repeats, keeping the first occurrence of each item in order."""
    seen = set()
    out = []
    for it in items:
        if it not in seen:
            seen.add(it)
            out.append(it)
    return out


@dataclass
class Joker:
    categories: List[Category] = field(default_factory=list)
    language: Optional[Language] = None
    blacklist_flags: List[BlacklistFlag] = field(default_factory=list)
    format: Optional[ResponseFormat] = None
    joke_type: Optional[JokeType] = None
    search_string: Optional[str] = None
    id_range: List[int] = field(default_factory=list)
    amount: Optional[int] = None
    safe_mode_flag: Optional[bool] = None
    authorization_key: Optional[str] = None
    base_url: Optional[str] = None

    def __post_init__(self) -> None:
        # Fixed once per instance; defaults to JOKEAPI_BASE_URL or BASE_URL
        if self.base_url is None:
            self.base_url = get_settings().base_url
        else:
            self.base_url = normalize_base_url(self.base_url)

    # --- setters ---------------------------------------------------------------
    # Batches are deduplicated on their own before being appended; entries
    # already stored from earlier calls are not compared against.

    def add_categories(self, categories: Iterable[Category]) -> "Joker":
        self.categories.extend(dedup(categories))
        return self

    def set_language(self, language: Language) -> "Joker":
        """English is the default, so this only needs calling for other languages."""
        self.language = language
        return self

    def add_blacklist_flags(self, flags: Iterable[BlacklistFlag]) -> "Joker":
        self.blacklist_flags.extend(dedup(flags))
        return self

    def set_format(self, format: ResponseFormat) -> "Joker":
        self.format = format
        return self

    def set_joke_type(self, joke_type: JokeType) -> "Joker":
        self.joke_type = joke_type
        return self

    def set_search_string(self, search_string: str) -> "Joker":
        """Ask for jokes containing this word or phrase. Sent as-is, without escaping."""
        self.search_string = search_string
        return self

    def set_id_range(self, start: int, end: int) -> "Joker":
        """
        Record an ID range. Values accumulate across calls and the range is
        only sent when exactly one pair has been recorded.
        """
        self.id_range.append(start)
        self.id_range.append(end)
        return self

    def set_amount(self, amount: int) -> "Joker":
        self.amount = amount
        return self

    def safe_mode(self, enabled: bool = True) -> "Joker":
        """Turn on safe mode. Any call sends the flag, including safe_mode(False)."""
        self.safe_mode_flag = enabled
        return self

    set_safe_mode = safe_mode

    def set_authorization(self, authorization_key: str) -> "Joker":
        self.authorization_key = authorization_key
        return self

    # --- serialization -----------------------------------------------------------

    def query_params(self) -> List[str]:
        """Query fragments in the order the API expects them."""
        params = []
        if self.language is not None:
            params.append(f"lang={self.language.value}")
        if self.blacklist_flags:
            params.append("blacklistFlags=" + ",".join(f.value for f in self.blacklist_flags))
        if self.format is not None:
            params.append(f"format={self.format.value}")
        if self.joke_type is not None:
            params.append(f"type={self.joke_type.value}")
        if self.search_string is not None:
            params.append(f"contains={self.search_string}")
        if len(self.id_range) == 2:
            params.append(f"idRange={self.id_range[0]}-{self.id_range[1]}")
        if self.amount is not None:
            params.append(f"amount={self.amount}")
        if self.safe_mode_flag is not None:
            params.append("safe-mode")
        return params

    def build_url(self) -> str:
        """
        Build the joke URL: ``<base>joke/<categories>[?<param>&<param>...]``.

        Stores ``Category.Any`` when no category has been added yet.
        """
        if not self.categories:
            self.categories.append(Category.Any)

        url = f"{self.base_url}joke/" + ",".join(c.value for c in self.categories)
        params = self.query_params()
        if params:
            url += "?" + "&".join(params)
        return url

    def headers(self) -> Dict[str, str]:
        """Request headers; the authorization key never goes into the URL."""
        if self.authorization_key is not None:
            return {"Authorization": self.authorization_key}
        return {}

    # --- transport ---------------------------------------------------------------

    def get_joke(self, timeout: Optional[float] = None) -> "api.JokeResult":
        return api.get_joke(self, timeout=timeout)

