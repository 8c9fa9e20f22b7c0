# leadimage/selection/image_selector.py
# Responsibility: Determines the lead image of an article by chaining the resolvers.

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from leadimage.config.settings import settings
from leadimage.document.article import Article
from leadimage.resolvers.page_scan import resolve_from_page
from leadimage.resolvers.social import resolve_from_social_tags

logger = logging.getLogger(__name__)

Resolver = Callable[[Article], str]

RESOLVERS: Dict[str, Resolver] = {
    "social": resolve_from_social_tags,
    "page": resolve_from_page,
}


@dataclass(frozen=True)
class LeadImage:
    url: Optional[str]
    source: Optional[str]


class ImageSelector:
    """
    Encapsulates the fallback policy for picking an article's lead image:
    social tags first, then a scan of the page's <img> elements.
    """

    def __init__(self, order: Optional[Sequence[str]] = None):
        """
        Args:
            order (Sequence[str]): Resolver names to try in turn. Defaults to settings.RESOLVER.ORDER.
        """
        self.order = list(order if order is not None else settings.RESOLVER.ORDER)
        unknown = [name for name in self.order if name not in RESOLVERS]
        if unknown:
            raise ValueError(f"Unknown resolver(s): {', '.join(unknown)}")

    def select_lead_image(self, article: Article) -> LeadImage:
        """
        Runs the resolvers in order and keeps the first non-empty answer.
        The answer is also stored on ``article.top_image``.

        Returns:
            LeadImage: url and resolver name, both None when nothing was found.
        """
        for name in self.order:
            url = RESOLVERS[name](article)
            if url:
                logger.info("Lead image for %s found by %s resolver: %s", article.url, name, url)
                article.top_image = url
                return LeadImage(url=url, source=name)

        logger.info("No lead image found for %s", article.url)
        article.top_image = None
        return LeadImage(url=None, source=None)

    def candidates(self, article: Article) -> Dict[str, str]:
        """Raw answer of every resolver, regardless of order."""
        return {name: resolver(article) for name, resolver in RESOLVERS.items()}
