# joketeller/__init__.py
"""joketeller: a small client for the JokeAPI (https://jokeapi.dev/).

    from joketeller import Joker, Category

    result = Joker().add_categories([Category.Programming]).get_joke()
    if result.ok:
        print(result.data)
"""
import logging

from dotenv import load_dotenv

# Load .env as early as possible so JOKEAPI_* settings are visible everywhere
load_dotenv()

from .api import (  # noqa: E402
    DECODE_ERROR,
    TRANSPORT_ERROR,
    JokeAPIError,
    JokeResult,
    get_joke,
    submit_joke,
    submit_joke_dryrun,
)
from .config import BASE_URL, Settings, get_settings  # noqa: E402
from .joker import Joker  # noqa: E402
from .options import (  # noqa: E402
    BlacklistFlag,
    Category,
    JokeType,
    Language,
    ResponseFormat,
    StatusCode,
    parse_option,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BASE_URL",
    "BlacklistFlag",
    "Category",
    "DECODE_ERROR",
    "JokeAPIError",
    "JokeResult",
    "JokeType",
    "Joker",
    "Language",
    "ResponseFormat",
    "Settings",
    "StatusCode",
    "TRANSPORT_ERROR",
    "get_joke",
    "get_settings",
    "parse_option",
    "submit_joke",
    "submit_joke_dryrun",
]
