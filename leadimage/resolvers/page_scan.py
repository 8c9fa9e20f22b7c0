# leadimage/resolvers/page_scan.py
# Responsibility: Picks the lead image among the <img> elements of a page.

import logging
from dataclasses import dataclass
from typing import List, Tuple

from bs4 import Tag

from leadimage.document.article import Article
from leadimage.document.attributes import get_attr_text, parse_int
from leadimage.resolvers.ranking import pick_last_max
from leadimage.resolvers.rules import SIGNIFICANT_SURFACE, score_image
from leadimage.resolvers.urls import prefix_scheme

logger = logging.getLogger(__name__)

SOURCE_ATTRIBUTES = ("src", "data-src", "data-lazy-src")


@dataclass(frozen=True)
class ImageCandidate:
    url: str
    surface: int
    score: int


def image_source(tag: Tag) -> str:
    """First non-empty of src, data-src, data-lazy-src ("" when none is set)."""
    for name in SOURCE_ATTRIBUTES:
        value = get_attr_text(tag, name)
        if value:
            return value
    return ""


def declared_surface(tag: Tag) -> int:
    """
    Surface from declared width/height attributes.
    A lone width or a lone height is used as the surface itself.
    """
    width = get_attr_text(tag, "width")
    height = get_attr_text(tag, "height")
    if width:
        if height:
            return parse_int(width) * parse_int(height)
        return parse_int(width)
    if height:
        return parse_int(height)
    return 0


def collect_candidates(article: Article) -> List[ImageCandidate]:
    """Candidates that compete for the lead spot (score >= 0), in document order."""
    return _scan(article)[0]


def _scan(article: Article) -> Tuple[List[ImageCandidate], int]:
    candidates: List[ImageCandidate] = []
    significant_count = 0

    for tag in article.doc.find_all("img"):
        if not isinstance(tag, Tag):
            continue

        source = image_source(tag)
        if not source:
            continue

        surface = declared_surface(tag)
        if surface > SIGNIFICANT_SURFACE:
            significant_count += 1

        score = score_image(tag, source)
        if score >= 0:
            candidates.append(ImageCandidate(url=source, surface=surface, score=score))

    return candidates, significant_count


def resolve_from_page(article: Article) -> str:
    """
    Scans every <img> and returns the best source url, or "" when no image qualifies.

    When at least one sourced image declares a surface above the significant
    threshold, the largest candidate wins; otherwise the best scored one does.
    Images scoring below zero never compete, whatever their size.
    """
    candidates, significant_count = _scan(article)
    if not candidates:
        logger.debug("No <img> candidates on %s", article.url)
        return ""

    if significant_count > 0:
        best = pick_last_max(candidates, key=lambda c: c.surface)
    else:
        best = pick_last_max(candidates, key=lambda c: c.score)

    top_image = best.url if best else ""
    logger.debug(
        "Page scan on %s: %d candidate(s), %d significant, picked %r",
        article.url, len(candidates), significant_count, top_image,
    )
    return prefix_scheme(top_image)
