from bs4 import BeautifulSoup

from leadimage.document.article import ArticleParser
from leadimage.resolvers.page_scan import (
    collect_candidates,
    declared_surface,
    image_source,
    resolve_from_page,
)


def _article(body: str):
    html = f"<html><head><title>Post</title></head><body>{body}</body></html>"
    return ArticleParser().parse("https://site.org/post", html)


def _img(markup: str):
    return BeautifulSoup(markup, "html.parser").img


def test_empty_document():
    assert resolve_from_page(_article("")) == ""
    assert resolve_from_page(ArticleParser().parse("https://site.org/", "")) == ""


def test_source_attribute_fallback():
    assert image_source(_img('<img src="http://site.org/a.jpg" data-src="http://site.org/b.jpg">')) == "http://site.org/a.jpg"
    assert image_source(_img('<img src="" data-src="http://site.org/b.jpg">')) == "http://site.org/b.jpg"
    assert image_source(_img('<img data-lazy-src="http://site.org/c.jpg">')) == "http://site.org/c.jpg"
    assert image_source(_img('<img alt="nothing">')) == ""


def test_sourceless_images_are_ignored():
    body = """
        <img width="1000" height="1000">
        <img src="" data-src="" data-lazy-src="" width="2000" height="2000">
        <img src="http://site.org/a.jpg" width="100" height="100">
        <img src="http://site.org/big.jpg" width="10">
    """
    article = _article(body)

    # 1. Only sourced images become candidates
    urls = [c.url for c in collect_candidates(article)]
    assert urls == ["http://site.org/a.jpg", "http://site.org/big.jpg"]

    # 2. Sourceless giants do not switch selection to surface mode
    assert resolve_from_page(article) == "http://site.org/big.jpg"


def test_declared_surface():
    assert declared_surface(_img('<img width="30" height="40">')) == 1200
    assert declared_surface(_img('<img width="70">')) == 70
    assert declared_surface(_img('<img height="90">')) == 90
    assert declared_surface(_img('<img>')) == 0
    assert declared_surface(_img('<img width="" height="50">')) == 50
    # Unparsable values count as 0
    assert declared_surface(_img('<img width="100px" height="1000">')) == 0
    assert declared_surface(_img('<img width="auto">')) == 0


def test_small_images_are_ranked_by_score():
    body = """
        <img src="http://site.org/large.jpg" width="20" height="25">
        <img src="http://site.org/photo.jpg" width="30" height="40">
    """
    assert resolve_from_page(_article(body)) == "http://site.org/large.jpg"


def test_significant_surface_ranks_by_surface():
    body = """
        <img src="http://site.org/photo.jpg" width="640" height="480">
        <img src="http://site.org/large.jpg" width="100" height="100">
    """
    assert resolve_from_page(_article(body)) == "http://site.org/photo.jpg"


def test_width_only_counts_as_surface():
    body = """
        <img src="http://site.org/wide.jpg" width="70000">
        <img src="http://site.org/photo.jpg" width="200" height="300">
    """
    assert resolve_from_page(_article(body)) == "http://site.org/wide.jpg"


def test_negative_scores_never_compete():
    body = """
        <img src="http://site.org/ads/banner.jpg" width="1000" height="1000">
        <img src="http://site.org/media/a.jpg" width="5" height="10">
        <img src="http://site.org/b.jpg" width="20" height="20">
    """
    article = _article(body)

    # 1. The banner is filtered out
    assert "http://site.org/ads/banner.jpg" not in [c.url for c in collect_candidates(article)]

    # 2. It still counted as significant, so the largest remaining wins
    assert resolve_from_page(article) == "http://site.org/b.jpg"


def test_only_junk_images():
    body = """
        <img src="http://site.org/logo.png">
        <img src="http://site.org/spinner.gif">
    """
    assert resolve_from_page(_article(body)) == ""


def test_thumbnail_alt_penalty_filters_candidate():
    body = '<img src="http://site.org/photo.jpg" alt="thumbnail">'
    assert resolve_from_page(_article(body)) == ""


def test_last_tie_wins():
    body = """
        <img src="http://site.org/first.jpg">
        <img src="http://site.org/second.jpg">
    """
    assert resolve_from_page(_article(body)) == "http://site.org/second.jpg"


def test_scheme_prefix_is_glued_on():
    assert resolve_from_page(_article('<img src="//cdn.example.com/x.jpg">')) == "http:////cdn.example.com/x.jpg"
    assert resolve_from_page(_article('<img src="/images/x.jpg">')) == "http:///images/x.jpg"
    assert resolve_from_page(_article('<img src="https://cdn.example.com/x.jpg">')) == "https://cdn.example.com/x.jpg"


def test_resolution_is_repeatable():
    article = _article('<img src="http://site.org/a.jpg"><img src="http://site.org/big.jpg">')
    assert resolve_from_page(article) == resolve_from_page(article)


def test_first_duplicate_attribute_wins():
    body = '<img src="http://site.org/first.jpg" src="http://site.org/second.jpg">'
    assert resolve_from_page(_article(body)) == "http://site.org/first.jpg"
