"""tokenpassport CLI - Build and sign token passports."""

import json
import sys
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from tokenpassport.common.errors import TokenPassportError, error_payload
from tokenpassport.common.logging import setup_logging
from tokenpassport.common.settings import Settings, get_settings
from tokenpassport.passport.algorithms import ALGORITHM_ALIASES
from tokenpassport.passport.nonce import generate_nonce
from tokenpassport.passport.passport import TokenPassport
from tokenpassport.passport.signature import TokenPassportSignature

console = Console()


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj["settings"]


def _pick(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


@click.group()
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a .env file with TOKENPASSPORT_* settings",
)
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")
@click.option("--log-json/--no-log-json", default=None, help="Emit logs as JSON lines")
@click.pass_context
def cli(
    ctx: click.Context,
    env_file: str | None,
    log_level: str | None,
    log_json: bool | None,
) -> None:
    """tokenpassport CLI - Build and sign TBA token passports."""
    settings = Settings(_env_file=env_file) if env_file else get_settings()  # type: ignore[call-arg]
    setup_logging(
        level=_pick(log_level, settings.log_level),
        json_output=bool(_pick(log_json, settings.log_json)),
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command("nonce")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), help="Number of nonces")
def nonce_cmd(count: int) -> None:
    """Generate fresh nonces."""
    for _ in range(count):
        click.echo(generate_nonce())


@cli.command("create-key")
@click.option("--consumer-secret", default=None, help="Consumer secret (default: settings)")
@click.option("--token-secret", default=None, help="Token secret (default: settings)")
@click.pass_context
def create_key_cmd(ctx: click.Context, consumer_secret: str | None, token_secret: str | None) -> None:
    """Derive the signing key from the consumer and token secrets."""
    settings = _settings(ctx)
    key = TokenPassportSignature.derive_key(
        _pick(consumer_secret, settings.consumer_secret),
        _pick(token_secret, settings.token_secret),
    )
    click.echo(key)


def _build_passport(
    settings: Settings,
    account: str | None,
    consumer_key: str | None,
    token: str | None,
    nonce: str | None,
    timestamp: int | None,
) -> TokenPassport:
    return TokenPassport(
        account=_pick(account, settings.account),
        consumer_key=_pick(consumer_key, settings.consumer_key),
        token=_pick(token, settings.token),
        nonce=nonce,
        timestamp=timestamp,
    )


def _passport_options(f: Any) -> Any:
    f = click.option("--timestamp", type=int, default=None, help="Fixed Unix timestamp")(f)
    f = click.option("--nonce", default=None, help="Fixed nonce")(f)
    f = click.option("--token", default=None, help="Token ID (default: settings)")(f)
    f = click.option("--consumer-key", default=None, help="Consumer key (default: settings)")(f)
    f = click.option("--account", default=None, help="Account ID (default: settings)")(f)
    return f


@cli.command("base-string")
@_passport_options
@click.pass_context
def base_string_cmd(
    ctx: click.Context,
    account: str | None,
    consumer_key: str | None,
    token: str | None,
    nonce: str | None,
    timestamp: int | None,
) -> None:
    """Print the signing base string of a new passport."""
    passport = _build_passport(_settings(ctx), account, consumer_key, token, nonce, timestamp)
    click.echo(passport.base_string())


@cli.command("header")
@_passport_options
@click.option("--consumer-secret", default=None, help="Consumer secret (default: settings)")
@click.option("--token-secret", default=None, help="Token secret (default: settings)")
@click.option("--algorithm", "-a", default=None, help="Signature algorithm (default: settings)")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON document instead of markup")
@click.pass_context
def header_cmd(
    ctx: click.Context,
    account: str | None,
    consumer_key: str | None,
    token: str | None,
    nonce: str | None,
    timestamp: int | None,
    consumer_secret: str | None,
    token_secret: str | None,
    algorithm: str | None,
    as_json: bool,
) -> None:
    """Build, sign and print a token passport header."""
    settings = _settings(ctx)
    passport = _build_passport(settings, account, consumer_key, token, nonce, timestamp)

    try:
        signed = passport.sign(
            _pick(consumer_secret, settings.consumer_secret),
            _pick(token_secret, settings.token_secret),
            _pick(algorithm, settings.signature_algorithm),
        )
    except TokenPassportError as exc:
        if as_json:
            click.echo(json.dumps(error_payload(exc.code, exc.message), indent=2))
        else:
            console.print(f"[red]Error: {exc.message}[/red]")
        sys.exit(1)

    if as_json:
        result = {
            "header": signed.serialize_header(),
            "base_string": passport.base_string(),
            "nonce": signed.nonce,
            "timestamp": signed.timestamp,
            "algorithm": signed.algorithm,
            "signature": signed.signature_value,
        }
        click.echo(json.dumps(result, indent=2))
    else:
        click.echo(signed.serialize_header())


@cli.command("algorithms")
def algorithms_cmd() -> None:
    """List accepted signature algorithm labels."""
    table = Table(title="Signature algorithms")
    table.add_column("Label", style="cyan")
    table.add_column("Digest", style="green")

    for label, digest in ALGORITHM_ALIASES.items():
        table.add_row(label, digest.value)

    console.print(table)


def main() -> None:
    """CLI entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
