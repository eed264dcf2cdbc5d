"""
Command-line interface for calendar-parser.

Usage:
    calendar-parser serve                     # Run the HTTP API
    calendar-parser parse "Yoga Mon & Thu all year"
    calendar-parser parse --image flyer.png   # Extract from an image
    echo "Dentist May 3 at 2pm" | calendar-parser parse -
"""

import asyncio
import json
import mimetypes
import socket
import sys
from pathlib import Path

import click
import structlog

from calendar_parser.config.settings import get_settings
from calendar_parser.observability.logging import setup_logging
from calendar_parser.observability.metrics import get_metrics

logger = structlog.get_logger(__name__)


def _port_available(host: str, port: int) -> bool:
    """Check whether host:port can be bound."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        # Same socket option uvicorn sets, so TIME_WAIT leftovers do not count
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Calendar Parser - turn text and images into calendar events."""
    if debug:
        import os
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.option("--host", default=None, help="API server host")
@click.option("--port", default=None, type=int, help="API server port")
@click.option("--reload", is_flag=True, help="Enable auto-reload (dev only)")
@click.option("--metrics/--no-metrics", default=False, help="Enable metrics server")
@click.option("--metrics-port", default=None, type=int, help="Metrics server port")
def serve(
    host: str | None,
    port: int | None,
    reload: bool,
    metrics: bool,
    metrics_port: int | None,
) -> None:
    """Start the calendar parser API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    if not _port_available(host, port):
        logger.error("Port already in use", host=host, port=port)
        click.echo(
            click.style(f"Port {port} is already in use.", fg="red")
            + f" Stop the other process or choose another port (PORT={port + 1} or --port {port + 1}).",
            err=True,
        )
        sys.exit(1)

    if metrics:
        metrics_port = metrics_port or settings.metrics_port
        get_metrics().start_server(port=metrics_port)
        click.echo(f"Metrics available on http://localhost:{metrics_port}/metrics")

    if not settings.openai_configured:
        click.echo(click.style("Warning: OPENAI_API_KEY is not set.", fg="yellow"), err=True)

    click.echo(f"Starting API server on http://{host}:{port}")
    click.echo(f"API docs available on http://localhost:{port}/docs")

    uvicorn.run(
        "calendar_parser.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def _load_image(path: Path):
    from calendar_parser.extraction.request_builder import ImageAttachment

    content_type, _ = mimetypes.guess_type(path.name)
    return ImageAttachment(
        data=path.read_bytes(),
        content_type=content_type,
        filename=path.name,
    )


def describe_event(event) -> str:
    """One-line human summary of a CalendarEvent."""
    if event.is_single_day:
        when = event.date
    elif event.is_range:
        when = f"{event.start_date} to {event.end_date}"
        if event.is_recurring:
            when += " every " + ", ".join(event.weekday_names())
    else:
        when = "undated"

    if event.all_day:
        hours = "all day"
    else:
        hours = "-".join(t for t in (event.start_time, event.end_time) if t) or "time unknown"

    return f"{event.title}: {when} ({hours})"


@main.command()
@click.argument("text", required=False)
@click.option(
    "--image",
    "image_paths",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Image file to include (repeatable)",
)
@click.option("--year", default=None, type=int, help="Year to assume when the text has none")
@click.option("--summary", is_flag=True, help="Print one line per event instead of JSON")
def parse(
    text: str | None,
    image_paths: tuple[Path, ...],
    year: int | None,
    summary: bool,
) -> None:
    """Extract calendar events and print them as JSON.

    TEXT may be omitted or '-' to read from stdin.
    """
    from calendar_parser.extraction.config import ExtractionConfig
    from calendar_parser.extraction.errors import ExtractionError
    from calendar_parser.extraction.schemas import CalendarEvent
    from calendar_parser.extraction.service import EventExtractionService

    if text is None or text == "-":
        stdin = click.get_text_stream("stdin")
        text = "" if stdin.isatty() else stdin.read()

    config = ExtractionConfig()
    if year is not None:
        config = config.model_copy(update={"assume_year": year})

    service = EventExtractionService(config=config, settings=get_settings())
    images = [_load_image(p) for p in image_paths]

    try:
        result = asyncio.run(service.parse(text, images))
    except ExtractionError as e:
        click.echo(json.dumps(e.to_payload(), indent=2, ensure_ascii=False), err=True)
        sys.exit(2 if e.status_code < 500 else 1)

    if summary:
        for item in result.events:
            if isinstance(item, dict):
                click.echo(describe_event(CalendarEvent.from_dict(item)))
        return

    click.echo(json.dumps({"events": result.events}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
