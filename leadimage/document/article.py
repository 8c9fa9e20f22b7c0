# leadimage/document/article.py
# Responsibility: The parsed article handle consumed by the image resolvers.

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup, Tag


@dataclass
class Article:
    """
    A parsed web page.
    ``doc`` is the navigable tree; ``top_image`` is filled in by the lead image selector.
    """
    url: str
    doc: BeautifulSoup
    title: str = ""
    top_image: Optional[str] = None


# -------------------------------
# Base Parser
# -------------------------------
class BaseParser(ABC):
    @abstractmethod
    def parse(self, url: str, html_content: str) -> Article:
        pass


# -------------------------------
# Default HTML Parser
# -------------------------------
class ArticleParser(BaseParser):
    """
    Builds an Article from raw HTML using BeautifulSoup.
    The tree is kept intact: no noise removal, so every <img>, <meta> and
    <link> stays visible to the resolvers.
    """

    def __init__(self, features: str = "html.parser"):
        self.features = features

    def _builder_options(self) -> Dict[str, Any]:
        # Attribute values stay raw text (no token splitting of rel/class)
        options: Dict[str, Any] = {"multi_valued_attributes": None}
        if self.features == "html.parser":
            # First occurrence of a duplicated attribute wins
            options["on_duplicate_attribute"] = "ignore"
        return options

    def parse(self, url: str, html_content: str) -> Article:
        soup = BeautifulSoup(html_content, self.features, **self._builder_options())
        return Article(url=url, doc=soup, title=self._extract_title(soup))

    def _extract_title(self, soup: BeautifulSoup) -> str:
        # OpenGraph title first
        og = soup.find("meta", property="og:title")
        if isinstance(og, Tag) and og.get("content"):
            return str(og["content"]).strip()
        title_tag = soup.find("title")
        if isinstance(title_tag, Tag) and title_tag.get_text(strip=True):
            return title_tag.get_text(strip=True)
        return ""


# -------------------------------
# Singleton Parser
# -------------------------------
PageParser = ArticleParser()
