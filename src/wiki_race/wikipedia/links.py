"""
Helpers for turning article titles and page anchors into search keys.

A key is the full URL of an article on the mobile site, e.g.
"https://en.m.wikipedia.org/wiki/Peter_Jenkins".
"""

import urllib.parse
from typing import List, Optional

from bs4 import BeautifulSoup

ARTICLE_BASE_URL = "https://en.m.wikipedia.org"
EXISTENCE_BASE_URL = "https://en.wikipedia.org"
ARTICLE_PATH_PREFIX = "/wiki/"

# Links under these prefixes are not articles, or are linked from so many
# pages that they would short-circuit almost every race.
EXCLUDED_PREFIXES = (
    "/wiki/File",
    "/wiki/Geographic_coordinate_system",
    "/wiki/Help",
    "/wiki/ISBN_",
    "/wiki/ISSN_",
    "/wiki/Main_Page",
    "/wiki/Special",
    "/wiki/Wayback_Machine",
    "/wiki/Wikipedia:",
)


def contains_excluded_prefix(href: str) -> bool:
    """Whether href starts with a prefix that marks a non-article link."""
    return href.startswith(EXCLUDED_PREFIXES)


def is_wiki_article(href: str) -> bool:
    """Whether href is a relative link to a regular article."""
    return href.startswith(ARTICLE_PATH_PREFIX) and not contains_excluded_prefix(href)


def key_from_title(title: str, base_url: str = ARTICLE_BASE_URL) -> str:
    """
    Build the search key for an article title.

    Examples:
      "Peter Jenkins"            =>   "https://en.m.wikipedia.org/wiki/Peter_Jenkins"
      "Pantheon (religion)"      =>   "https://en.m.wikipedia.org/wiki/Pantheon_(religion)"
    """
    return base_url + ARTICLE_PATH_PREFIX + title.replace(" ", "_")


def existence_url(title: str, base_url: str = EXISTENCE_BASE_URL) -> str:
    """URL of the desktop article used to check whether a title exists."""
    return key_from_title(title, base_url=base_url)


def key_from_href(href: str, base_url: str = ARTICLE_BASE_URL) -> Optional[str]:
    """Key for an anchor href, or None when the link is not an article."""
    if not is_wiki_article(href):
        return None
    href = href.split("#", 1)[0]
    if href == ARTICLE_PATH_PREFIX:
        return None
    return base_url + href


def title_from_key(key: str) -> str:
    """Human-readable title for a key; the inverse of key_from_title."""
    _, _, slug = key.partition(ARTICLE_PATH_PREFIX)
    return urllib.parse.unquote(slug).replace("_", " ")


def extract_article_keys(html: str, base_url: str = ARTICLE_BASE_URL) -> List[str]:
    """Keys of all article links in a page, in document order, without duplicates."""
    soup = BeautifulSoup(html, "html.parser")
    keys = []
    for anchor in soup.find_all("a", href=True):
        key = key_from_href(anchor["href"], base_url=base_url)
        if key is not None:
            keys.append(key)
    return list(dict.fromkeys(keys))
