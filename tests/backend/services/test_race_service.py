import logging

import pytest

from backend.exceptions import InvalidQueryException
from backend.services.race_service import RaceService, validate_query
from wiki_race.search import NO_PATH_FOUND, SearchSettings
from wiki_race.wikipedia import key_from_title

START = "St. Olaf College"
DESTINATION = "Pantheon (religion)"


@pytest.fixture
def linked_graph(make_graph):
    """START links to Lutheranism, which DESTINATION also links to."""
    start_key = key_from_title(START)
    destination_key = key_from_title(DESTINATION)
    middle_key = key_from_title("Lutheranism")
    return make_graph({start_key: [middle_key], destination_key: [middle_key]})


def test_validate_query_accepts_both_params():
    assert validate_query("A", "B") == ("A", "B")


@pytest.mark.parametrize("start, destination, message", [
    (None, "B", "Url param 'start' is missing. "),
    ("A", "", "Url param 'destination' is missing. "),
    ("", None, "Url param 'start' is missing. Url param 'destination' is missing. "),
    ("   ", "B", "Url param 'start' is missing. "),
    ("A", "\t", "Url param 'destination' is missing. "),
])
def test_validate_query_reports_every_missing_param(start, destination, message):
    with pytest.raises(InvalidQueryException) as excinfo:
        validate_query(start, destination)
    assert excinfo.value.message == message


@pytest.mark.asyncio
async def test_race_finds_a_path(linked_graph, make_existence_check):
    service = RaceService(linked_graph, make_existence_check())

    response = await service.race(START, DESTINATION)

    assert response.completed
    assert response.start == START
    assert response.destination == DESTINATION
    assert response.message == ""
    assert response.path == " -> ".join([
        "https://en.m.wikipedia.org/wiki/St._Olaf_College",
        "https://en.m.wikipedia.org/wiki/Lutheranism",
        "https://en.m.wikipedia.org/wiki/Pantheon_(religion)",
    ])
    assert float(response.elapsed_time_sec) >= 0
    # "%f" formatting always carries six decimals
    assert len(response.elapsed_time_sec.split(".")[1]) == 6


@pytest.mark.asyncio
async def test_race_reports_exhaustion(make_graph, make_existence_check):
    service = RaceService(make_graph({}), make_existence_check())

    response = await service.race("Island A", "Island B")

    assert not response.completed
    assert response.path == NO_PATH_FOUND
    assert response.start == "Island A"
    assert response.message == ""


@pytest.mark.asyncio
async def test_missing_params_never_start_a_search(make_graph, make_existence_check):
    graph = make_graph({})
    existence = make_existence_check()
    service = RaceService(graph, existence)

    response = await service.race(None, "")

    assert not response.completed
    assert response.message == "Url param 'start' is missing. Url param 'destination' is missing. "
    assert response.path == ""
    assert response.elapsed_time_sec == ""
    assert existence.checked == []
    assert graph.calls == []


@pytest.mark.asyncio
async def test_unknown_article_never_starts_a_search(make_graph, make_existence_check):
    graph = make_graph({})
    existence = make_existence_check(missing={DESTINATION})
    service = RaceService(graph, existence)

    response = await service.race(START, DESTINATION)

    assert not response.completed
    assert response.message == f"The article {DESTINATION} does not exist."
    assert response.start == ""
    assert existence.checked == [START, DESTINATION]
    assert graph.calls == []


@pytest.mark.asyncio
async def test_start_is_checked_before_destination(make_graph, make_existence_check):
    existence = make_existence_check(missing={START, DESTINATION})
    service = RaceService(make_graph({}), existence)

    response = await service.race(START, DESTINATION)

    assert response.message == f"The article {START} does not exist."
    assert existence.checked == [START]


@pytest.mark.asyncio
async def test_settings_reach_the_search(linked_graph, make_existence_check):
    service = RaceService(linked_graph, make_existence_check(), SearchSettings(max_concurrent_lookups=1))

    response = await service.race(START, DESTINATION)

    assert response.completed
    assert linked_graph.max_in_flight == 1


@pytest.mark.asyncio
async def test_blank_params_never_start_a_search(make_graph, make_existence_check):
    graph = make_graph({})
    existence = make_existence_check()
    service = RaceService(graph, existence)

    response = await service.race("   ", DESTINATION)

    assert not response.completed
    assert response.message == "Url param 'start' is missing. "
    assert existence.checked == []
    assert graph.calls == []


@pytest.mark.asyncio
async def test_found_path_is_logged_as_titles(linked_graph, make_existence_check, caplog):
    service = RaceService(linked_graph, make_existence_check())

    with caplog.at_level(logging.INFO, logger="backend.services.race_service"):
        await service.race(START, DESTINATION)

    assert "St. Olaf College -> Lutheranism -> Pantheon (religion)" in caplog.text
