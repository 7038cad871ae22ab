"""CLI for deckhand using Click.

Provides account commands (`login`, `logout`), `project` to show the
resolved project settings and `explain` to show the errors from the last
command invocation.
"""

import sys
from pathlib import Path
from typing import NoReturn

import click

from deckhand.config import ApiKey, DeckhandError
from deckhand.context import RequestContext
from deckhand.errorlog import ErrorLogManager, assemble_explanation
from deckhand.logging import configure_logging


def _fail(error: DeckhandError, record: bool = True) -> NoReturn:
    """Report an error, append it to the error log and exit."""
    click.echo(f"Error: {error}", err=True)
    if record:
        try:
            ErrorLogManager().write_generic_error(str(error))
        except DeckhandError as log_error:
            click.echo(f"Warning: {log_error}", err=True)
    sys.exit(1)


@click.group()
@click.option(
    "--api-url",
    envvar="DECKHAND_API_URL",
    default=None,
    help="Override the platform API URL",
)
@click.option(
    "--beta",
    is_flag=True,
    help="Use the beta platform API by default",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show debug logs on stderr",
)
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, beta: bool, debug: bool) -> None:
    """deckhand - deploy projects to the deckhand platform."""
    ctx.ensure_object(dict)

    configure_logging(level="DEBUG" if debug else "WARNING")

    try:
        context = RequestContext.load_global()
    except DeckhandError as e:
        _fail(e, record=False)

    context.set_api_url(api_url)

    ctx.obj["context"] = context
    ctx.obj["beta"] = beta


@cli.command()
@click.option(
    "--api-key",
    default=None,
    help="API key (prompted for when not given)",
)
@click.pass_context
def login(ctx: click.Context, api_key: str | None) -> None:
    """Store an API key in the global configuration.

    Examples:

        \b
        # Prompt for the key
        deckhand login

        \b
        # Pass the key directly
        deckhand login --api-key 0123456789abcdef
    """
    context: RequestContext = ctx.obj["context"]

    if api_key is None:
        api_key = click.prompt("API key", hide_input=True, type=str)

    try:
        context.set_api_key(ApiKey.parse(api_key, source="login input"))
    except DeckhandError as e:
        _fail(e)

    click.echo(f"API key saved to {context.global_config.manager.path()}")


@cli.command()
@click.pass_context
def logout(ctx: click.Context) -> None:
    """Remove the stored API key."""
    context: RequestContext = ctx.obj["context"]

    try:
        context.clear_api_key()
    except DeckhandError as e:
        _fail(e)

    click.echo("Successfully logged out.")


@cli.command()
@click.option(
    "--name",
    default=None,
    help="Project name (overrides Deckhand.toml and pyproject.toml)",
)
@click.option(
    "-d",
    "--dir",
    "working_directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current directory)",
)
@click.pass_context
def project(
    ctx: click.Context, name: str | None, working_directory: Path | None
) -> None:
    """Show the resolved project settings.

    Examples:

        \b
        # Current directory
        deckhand project

        \b
        # Another project, with an explicit name
        deckhand project -d ~/myproject --name my-app
    """
    context: RequestContext = ctx.obj["context"]

    if working_directory is None:
        working_directory = Path.cwd()

    try:
        context.load_local(working_directory.resolve(), name=name)
    except DeckhandError as e:
        _fail(e)

    click.echo(f"Project:   {context.project_name}")
    click.echo(f"Directory: {context.working_directory}")
    click.echo(f"API URL:   {context.api_url(ctx.obj['beta'])}")
    if context.assets:
        click.echo("Assets:")
        for pattern in context.assets:
            click.echo(f"  {pattern}")


@cli.command()
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the explanation as JSON",
)
def explain(as_json: bool) -> None:
    """Show the errors from your last command invocation.

    Source files referenced by the errors are listed with them.
    """
    try:
        batch = ErrorLogManager().fetch_last_batch()
        explanation = assemble_explanation(batch)
    except DeckhandError as e:
        _fail(e, record=False)

    if as_json:
        click.echo(explanation.model_dump_json(indent=2))
        return

    for record in explanation.records:
        location = ""
        if record.source_file:
            location = record.source_file
            if record.line is not None:
                location += f":{record.line}"
                if record.column is not None:
                    location += f":{record.column}"
            location = f" ({location})"
        code = f"[{record.code}] " if record.code else ""
        click.echo(f"{record.kind}: {code}{record.message}{location}")

    if explanation.sources:
        click.echo()
        click.echo("Sources:")
        for source in explanation.sources:
            click.echo(f"  {source.path}")


if __name__ == "__main__":
    cli()
