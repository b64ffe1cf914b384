import pytest

from wiki_race.wikipedia import (
    ARTICLE_BASE_URL,
    contains_excluded_prefix,
    extract_article_keys,
    is_wiki_article,
    key_from_href,
    key_from_title,
    title_from_key,
)
from wiki_race.wikipedia.links import existence_url


def test_key_from_title_replaces_spaces():
    assert key_from_title("Peter Jenkins") == "https://en.m.wikipedia.org/wiki/Peter_Jenkins"
    assert key_from_title("St. Olaf College") == "https://en.m.wikipedia.org/wiki/St._Olaf_College"
    assert key_from_title("a  b") == ARTICLE_BASE_URL + "/wiki/a__b"


def test_key_from_title_custom_base():
    assert key_from_title("Madison, Wisconsin", base_url="http://wiki.test") == "http://wiki.test/wiki/Madison,_Wisconsin"


def test_existence_url_uses_desktop_site():
    assert existence_url("Pantheon (religion)") == "https://en.wikipedia.org/wiki/Pantheon_(religion)"


@pytest.mark.parametrize("href", [
    "/wiki/Special:Random",
    "/wiki/Help:Contents",
    "/wiki/File:Example.jpg",
    "/wiki/Main_Page",
    "/wiki/Wikipedia:About",
    "/wiki/ISBN_(identifier)",
    "/wiki/ISSN_(identifier)",
    "/wiki/Geographic_coordinate_system",
    "/wiki/Wayback_Machine",
])
def test_non_article_links_are_rejected(href):
    assert contains_excluded_prefix(href)
    assert not is_wiki_article(href)
    assert key_from_href(href) is None


@pytest.mark.parametrize("href", [
    "/wiki/Madison,_Wisconsin",
    "/wiki/Peter_Jenkins",
    "/wiki/Helsinki",
    "/wiki/Filmmaking",
])
def test_article_links_are_accepted(href):
    assert is_wiki_article(href)
    assert key_from_href(href) == ARTICLE_BASE_URL + href


def test_excluded_prefixes_match_raw_text():
    # Matching is on the raw href, so articles that merely start with an excluded word go too.
    assert not is_wiki_article("/wiki/Help_desk")
    assert not is_wiki_article("/wiki/Filet_mignon")


def test_plain_article_is_accepted():
    assert is_wiki_article("/wiki/Madison,_Wisconsin")
    assert not contains_excluded_prefix("yabba dabba do")


@pytest.mark.parametrize("href", [
    "/yowzer/wiki/yowza",
    "https://example.com/wiki/Thing",
    "#cite_note-1",
    "",
])
def test_non_wiki_links_are_rejected(href):
    assert not is_wiki_article(href)


def test_key_from_href_drops_fragment():
    assert key_from_href("/wiki/Python_(programming_language)#History") == (
        "https://en.m.wikipedia.org/wiki/Python_(programming_language)"
    )
    assert key_from_href("/wiki/#top") is None


def test_title_from_key_round_trip():
    assert title_from_key(key_from_title("Peter Jenkins")) == "Peter Jenkins"
    assert title_from_key("https://en.m.wikipedia.org/wiki/Caf%C3%A9_society") == "Café society"


def test_extract_article_keys():
    html = """
    <html><body>
      <a href="/wiki/Lutheranism">Lutheranism</a>
      <a href="/wiki/Special:Search">Search</a>
      <a href="/wiki/Northfield,_Minnesota#Geography">Northfield</a>
      <a>no href</a>
      <a href="https://www.stolaf.edu/">External</a>
      <a href="/wiki/Lutheranism">Lutheranism again</a>
      <a href="/wiki/File:Seal.png"><img src="seal.png"></a>
      <a href="/wiki/Northfield,_Minnesota">Northfield again</a>
    </body></html>
    """

    assert extract_article_keys(html) == [
        "https://en.m.wikipedia.org/wiki/Lutheranism",
        "https://en.m.wikipedia.org/wiki/Northfield,_Minnesota",
    ]


def test_extract_article_keys_from_empty_page():
    assert extract_article_keys("") == []
