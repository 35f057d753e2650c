"""Breed-name helpers.

dog.ceo image URLs carry the breed as the path segment after `breeds`,
with sub-breeds appended after a dash (`schnauzer-miniature`). The display
form puts the sub-breed first: "Miniature Schnauzer".
"""

from __future__ import annotations

import re

_WORD = re.compile(r"\S+")


def capitalize_words(text: str) -> str:
    """Upper-case the first letter of every word and lower-case the rest.

    Whitespace between words is kept as-is.
    """

    return _WORD.sub(lambda m: m.group(0).capitalize(), text)


def extract_breed_name(url: str) -> str | None:
    """Return the path component that follows `breeds`, if any."""

    components = url.split("/")
    try:
        index = components.index("breeds")
    except ValueError:
        return None
    if index + 1 < len(components):
        return components[index + 1]
    return None


def format_breed_name(breed: str) -> str:
    """Turn a breed segment into its display form.

    Two dash-separated words are swapped ("schnauzer-miniature" becomes
    "Miniature Schnauzer"); anything else is just capitalized.
    """

    name = breed.replace("-", " ")
    words = name.split()
    if len(words) == 2:
        return f"{words[1].capitalize()} {words[0].capitalize()}"
    return capitalize_words(name)
