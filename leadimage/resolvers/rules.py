# leadimage/resolvers/rules.py
# Responsibility: Fixed pattern -> weight table scoring how "lead-worthy" an image source looks.

import re
from dataclasses import dataclass
from typing import Tuple

from bs4 import Tag

from leadimage.document.attributes import get_attr


@dataclass(frozen=True)
class ScoreRule:
    pattern: re.Pattern
    weight: int

    def applies(self, url: str) -> bool:
        return self.pattern.search(url) is not None


def _rule(pattern: str, weight: int, flags: int = 0) -> ScoreRule:
    return ScoreRule(pattern=re.compile(pattern, flags), weight=weight)


# An <img> declaring more than this surface is "significant".
SIGNIFICANT_SURFACE = 320 * 200

# Prepended verbatim to winners that do not start with "http".
SCHEME_PREFIX = "http://"

# Shared with the social resolver's tie-break.
LARGE_OR_BIG = re.compile(r"(large|big)")

JUNK_MARKERS = (
    ".html|.gif|.ico|button|twitter.jpg|facebook.jpg|ap_buy_photo|digg.jpg|digg.png"
    "|delicious.png|facebook.png|reddit.jpg|doubleclick|diggthis|diggThis|adserver"
    "|/ads/|ec.atdmt.com|mediaplex.com|adsatt|view.atdmt"
)

# Dots are unescaped and match any character.
SCORE_RULES: Tuple[ScoreRule, ...] = (
    ScoreRule(pattern=LARGE_OR_BIG, weight=1),
    _rule("upload", 1),
    _rule("media", 1),
    _rule("gravatar.com", -1),
    _rule("feeds.feedburner.com", -1),
    _rule("icon", -1, re.I),
    _rule("logo", -1, re.I),
    _rule("spinner", -1, re.I),
    _rule("loading", -1, re.I),
    _rule("ads", -1, re.I),
    _rule("badge", -1),
    _rule("1x1", -1),
    _rule("pixel", -1),
    _rule("thumbnail[s]*", -1),
    _rule(JUNK_MARKERS, -1),
)


def score_source(url: str) -> int:
    """
    Sums the weight of every rule matching anywhere in ``url``.
    All rules are evaluated; a url matching nothing scores 0.
    """
    return sum(rule.weight for rule in SCORE_RULES if rule.applies(url))


def alt_penalty(tag: Tag) -> int:
    """-1 when the element's alt text mentions a thumbnail, applied once per element."""
    alt = get_attr(tag, "alt")
    if alt is not None and "thumbnail" in alt:
        return -1
    return 0


def score_image(tag: Tag, source: str) -> int:
    return score_source(source) + alt_penalty(tag)
