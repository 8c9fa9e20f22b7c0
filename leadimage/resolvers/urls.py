# leadimage/resolvers/urls.py
# Responsibility: Final url touch-up shared by both resolvers.

from leadimage.resolvers.rules import SCHEME_PREFIX


def prefix_scheme(url: str) -> str:
    """
    Prepends "http://" to a non-empty url lacking an "http" start. The
    prefix is glued on as is, so "//cdn/x.jpg" becomes "http:////cdn/x.jpg".
    """
    if url and not url.startswith("http"):
        return SCHEME_PREFIX + url
    return url
