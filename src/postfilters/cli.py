"""CLI interface for postfilters.

Runs the post filters outside of a site build, e.g. to check what a template
will produce for a given post.
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import IO, NoReturn

import click

from postfilters.config import Config
from postfilters.core.excerpt import extract_excerpt
from postfilters.core.gravatar import hash_identity
from postfilters.core.static import render_static
from postfilters.errors import PostFiltersError
from postfilters.page import PageContext, load_page_context

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """Postfilters - Jekyll post filters from the command line."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("html_file", type=click.File("r", encoding="utf-8"), default="-")
def excerpt(html_file: IO[str]) -> None:
    """Print the first paragraph of an HTML document.

    Reads from HTML_FILE, or from stdin when omitted.
    """
    try:
        html = html_file.read()
    except UnicodeDecodeError as e:
        _fail(f"{html_file.name} is not valid UTF-8: {e}")

    try:
        click.echo(extract_excerpt(html))
    except PostFiltersError as e:
        _fail(str(e))


@cli.command()
@click.argument("email")
def gravatar(email: str) -> None:
    """Print the Gravatar image URL for EMAIL."""
    click.echo(hash_identity(email))


@cli.command()
@click.argument("path")
@click.option(
    "--post",
    "post_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Post whose front matter provides title and static values",
)
@click.option(
    "--title",
    default=None,
    help="Post title (overrides front matter)",
)
@click.option(
    "--static",
    "static_dir",
    default=None,
    help="Explicit resource directory name (overrides front matter)",
)
@click.option(
    "--files-url",
    default=None,
    help="Base URL for post resources (overrides config)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover postfilters.toml)",
)
def static(
    path: str,
    post_file: Path | None,
    title: str | None,
    static_dir: str | None,
    files_url: str | None,
    config_path: Path | None,
) -> None:
    """Print the full resource URL of PATH for a post."""
    try:
        config = Config.load(config_path).with_overrides(files_url=files_url)
        page = _load_page(post_file)
        if static_dir is not None:
            page = replace(page, static=static_dir)
        if title is not None:
            page = replace(page, title=title)
        click.echo(render_static(page.to_static_context(config.site.files_url), path))
    except (FileNotFoundError, ValueError, PostFiltersError) as e:
        _fail(str(e))


def _load_page(post_file: Path | None) -> PageContext:
    """Read page context from a post file, or an empty one without a file."""
    if post_file is None:
        return PageContext()
    logger.debug(f"Reading front matter from {post_file}")
    return load_page_context(post_file.read_text(encoding="utf-8"))


def _fail(message: str) -> NoReturn:
    """Print an error message and exit with status 1."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
