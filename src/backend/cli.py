import asyncio
import json
from typing import Optional

import typer

from backend.config import config
from backend.services.race_service import RaceService
from wiki_race.search import SearchSettings
from wiki_race.wikipedia import LiveWikiService


app = typer.Typer()


@app.command()
def main(
    start: str = typer.Argument(..., help="Start article title."),
    destination: str = typer.Argument(..., help="Destination article title."),
    max_concurrency: int = typer.Option(
        config.max_concurrent_lookups,
        "--max-concurrency",
        "-c",
        help="Maximum number of page lookups in flight at once.",
    ),
    lookup_timeout: Optional[float] = typer.Option(
        config.lookup_timeout_sec,
        "--lookup-timeout",
        "-t",
        help="Seconds before a single page lookup is abandoned.",
    ),
    log_level: str = typer.Option(config.log_level, "--log-level", "-l", help="Log level."),
):
    """
    Find a chain of links between two Wikipedia articles and print the result as JSON.
    """
    from wiki_race.logging_config import setup_logging

    setup_logging(level=log_level, use_rich=config.use_rich_logging())
    settings = SearchSettings(max_concurrent_lookups=max_concurrency, lookup_timeout_sec=lookup_timeout)
    response = asyncio.run(run_race_async(start, destination, settings))
    typer.echo(json.dumps(response, indent=2))


async def run_race_async(start: str, destination: str, settings: SearchSettings) -> dict:
    async with LiveWikiService(
        article_base_url=config.article_base_url,
        existence_base_url=config.existence_base_url,
        timeout=config.http_timeout_sec,
    ) as wiki_service:
        service = RaceService(
            lookup=wiki_service,
            existence_check=wiki_service,
            settings=settings,
            article_base_url=wiki_service.article_base_url,
        )
        response = await service.race(start, destination)
    return response.model_dump(by_alias=True)


if __name__ == "__main__":
    app()
