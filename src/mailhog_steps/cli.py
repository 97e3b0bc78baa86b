"""CLI entry point for MailHog Steps."""

from __future__ import annotations

import click

from .assertions import assert_contains, resolve_link
from .constants import DEFAULT_MESSAGES_ENDPOINT, ENDPOINT_ENV_VAR
from .display import console, display_email
from .errors import MailHogError
from .extractor import extract
from .mailhog_client import MessageStoreClient
from .models import EmailView


def _last_email(ctx: click.Context) -> EmailView:
    client: MessageStoreClient = ctx.obj["client"]
    try:
        return extract(client.fetch_latest_message(), by_content_type=ctx.obj["by_content_type"])
    except MailHogError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version="0.1.0", prog_name="mailhog-steps")
@click.option(
    "--endpoint",
    envvar=ENDPOINT_ENV_VAR,
    default=DEFAULT_MESSAGES_ENDPOINT,
    show_default=True,
    help="MailHog v2 messages endpoint.",
)
@click.option("--by-content-type", is_flag=True, help="Pick the text/html MIME part instead of the second part.")
@click.pass_context
def cli(ctx: click.Context, endpoint: str, by_content_type: bool) -> None:
    """MailHog Steps - inspect the last email captured by MailHog."""
    ctx.ensure_object(dict)
    ctx.obj["client"] = MessageStoreClient(endpoint=endpoint)
    ctx.obj["by_content_type"] = by_content_type


@cli.command()
@click.pass_context
def latest(ctx: click.Context) -> None:
    """Show the fields and decoded HTML of the last email."""
    display_email(_last_email(ctx))


@cli.command()
@click.argument("text")
@click.pass_context
def contains(ctx: click.Context, text: str) -> None:
    """Check that the last email contains TEXT."""
    view = _last_email(ctx)
    try:
        assert_contains(view, text)
    except MailHogError as e:
        raise click.ClickException(str(e)) from e
    console.print("[green]Content found in last email.[/green]")


@cli.command()
@click.argument("text")
@click.pass_context
def link(ctx: click.Context, text: str) -> None:
    """Print the URL of the link labelled TEXT in the last email."""
    view = _last_email(ctx)
    try:
        url = resolve_link(view, text)
    except MailHogError as e:
        raise click.ClickException(str(e)) from e
    click.echo(url)
