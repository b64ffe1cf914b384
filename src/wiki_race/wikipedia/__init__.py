"""
Wikipedia module for Wiki Race.

Turns titles and page anchors into search keys and fetches live pages.
"""

from .links import (
    ARTICLE_BASE_URL,
    EXISTENCE_BASE_URL,
    contains_excluded_prefix,
    extract_article_keys,
    is_wiki_article,
    key_from_href,
    key_from_title,
    title_from_key,
)
from .live_service import LiveWikiService

__all__ = [
    'ARTICLE_BASE_URL',
    'EXISTENCE_BASE_URL',
    'contains_excluded_prefix',
    'extract_article_keys',
    'is_wiki_article',
    'key_from_href',
    'key_from_title',
    'title_from_key',
    'LiveWikiService',
]
