# leadimage/document/attributes.py
# Responsibility: Attribute lookup on bs4 tags with "present + string value" semantics.

import re
from typing import Any, Optional

from bs4 import Tag

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def get_attr(tag: Tag, name: str) -> Optional[str]:
    """
    Returns the raw text of attribute ``name``, or None when it is absent.
    Expects a tree built by ArticleParser, which keeps values unsplit.
    """
    value: Any = tag.get(name)
    if value is None:
        return None
    return str(value)


def get_attr_text(tag: Tag, name: str) -> str:
    """Same as get_attr, but an absent attribute reads as an empty string."""
    return get_attr(tag, name) or ""


def parse_int(value: str) -> int:
    """
    Parses a declared dimension. Anything that is not an optionally signed
    run of ASCII digits (e.g. "100px", "auto", " 50") is treated as 0.
    """
    if not _INTEGER_RE.fullmatch(value):
        return 0
    return int(value)
