"""Command-line interface for friendlytoken."""

from __future__ import annotations

import sys

import click
import structlog
import uvicorn
from safir.click import display_help

from .dependencies.config import config_dependency
from .exceptions import EntropyUnavailableError, UnrecognizedCategoryError
from .factory import Factory
from .main import create_openapi
from .models.enums import TokenKind

__all__ = [
    "generate",
    "help",
    "main",
    "openapi_schema",
    "run",
    "validate",
]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Command-line interface for friendlytoken."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.option(
    "--org",
    "organization",
    default=None,
    help="Organization to derive the prefix from if no type is given.",
)
@click.option(
    "--type",
    "token_type",
    type=click.Choice([k.value for k in TokenKind]),
    default=None,
    help="Type of token, which determines the prefix.",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of tokens to generate.",
)
def generate(
    *, organization: str | None, token_type: str | None, count: int
) -> None:
    """Generate new tokens and print them, one per line."""
    config = config_dependency.config()
    logger = structlog.get_logger(config.name)
    token_service = Factory(logger).create_token_service()
    try:
        for _ in range(count):
            click.echo(token_service.friendly_token(organization, token_type))
    except UnrecognizedCategoryError as e:
        raise click.UsageError(str(e)) from e
    except EntropyUnavailableError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("token")
def validate(*, token: str) -> None:
    """Check whether TOKEN is a well-formed token.

    Prints valid or invalid, and exits with status 1 if invalid.
    """
    token_service = Factory().create_token_service()
    if token_service.validate(token):
        click.echo("valid")
    else:
        click.echo("invalid")
        sys.exit(1)


@main.command()
def openapi_schema() -> None:
    """Generate the OpenAPI schema."""
    click.echo(create_openapi(), nl=False)


@main.command()
@click.option(
    "--port", default=8080, type=int, help="Port to run the application on."
)
def run(*, port: int) -> None:
    """Run the application (for testing only)."""
    uvicorn.run(
        "friendlytoken.main:create_app", factory=True, port=port, reload=True
    )
