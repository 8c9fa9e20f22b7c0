# leadimage/resolvers/social.py
# Responsibility: Picks the lead image declared through Open Graph / Twitter Card tags.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from bs4 import Tag

from leadimage.document.article import Article
from leadimage.document.attributes import get_attr
from leadimage.resolvers.ranking import pick_last_max
from leadimage.resolvers.rules import LARGE_OR_BIG
from leadimage.resolvers.urls import prefix_scheme

logger = logging.getLogger(__name__)


class SocialFamily(str, Enum):
    FACEBOOK = "facebook"
    TWITTER = "twitter"


@dataclass(frozen=True)
class SocialTagSpec:
    """
    One shape of social image declaration, e.g. <meta property="og:image" content="...">:
    the element is located by ``locator_attribute == locator_value`` and the
    url is read from ``value_attribute``.
    """
    family: SocialFamily
    locator_attribute: str
    locator_value: str
    value_attribute: str


@dataclass
class SocialImageCandidate:
    url: str
    family: SocialFamily
    score: int = 0


SOCIAL_TAG_SPECS: Tuple[SocialTagSpec, ...] = (
    SocialTagSpec(SocialFamily.FACEBOOK, "property", "og:image", "content"),
    SocialTagSpec(SocialFamily.FACEBOOK, "rel", "image_src", "href"),
    SocialTagSpec(SocialFamily.TWITTER, "name", "twitter:image", "value"),
    SocialTagSpec(SocialFamily.TWITTER, "name", "twitter:image", "content"),
)


def _social_elements(article: Article) -> List[Tag]:
    # All <meta> first, then the <link> elements not already selected.
    elements = [tag for tag in article.doc.find_all("meta") if isinstance(tag, Tag)]
    seen = {id(tag) for tag in elements}
    for tag in article.doc.find_all("link"):
        if isinstance(tag, Tag) and id(tag) not in seen:
            seen.add(id(tag))
            elements.append(tag)
    return elements


def _match(tag: Tag, spec: SocialTagSpec) -> bool:
    return (
        get_attr(tag, spec.locator_attribute) == spec.locator_value
        and get_attr(tag, spec.value_attribute) is not None
    )


def collect_social_candidates(article: Article) -> List[SocialImageCandidate]:
    """
    Returns one candidate per (element, matching spec) pair, unscored.
    An element matching several specs yields several candidates.
    """
    candidates: List[SocialImageCandidate] = []
    for tag in _social_elements(article):
        for spec in SOCIAL_TAG_SPECS:
            if _match(tag, spec):
                candidates.append(
                    SocialImageCandidate(
                        url=get_attr(tag, spec.value_attribute) or "",
                        family=spec.family,
                    )
                )
    return candidates


def score_social_candidate(candidate: SocialImageCandidate) -> int:
    score = 0
    if LARGE_OR_BIG.search(candidate.url):
        score += 1
    if candidate.family is SocialFamily.TWITTER:
        score += 1
    return score


def resolve_from_social_tags(article: Article) -> str:
    """
    Returns the url of the best social image tag, or "" when the page declares none.

    A lone declaration wins outright. Otherwise Twitter declarations and urls
    mentioning "large"/"big" are favoured; on equal scores the one declared
    last wins.
    """
    candidates = collect_social_candidates(article)
    if not candidates:
        logger.debug("No social image tags on %s", article.url)
        return ""

    if len(candidates) == 1:
        top_image = candidates[0].url
    else:
        for candidate in candidates:
            candidate.score = score_social_candidate(candidate)
        best = pick_last_max(candidates, key=lambda c: c.score)
        top_image = best.url if best else ""

    logger.debug(
        "Social tags on %s: %d candidate(s), picked %r",
        article.url, len(candidates), top_image,
    )
    return prefix_scheme(top_image)
