"""Command-line interface for credpolicy.

This module provides commands for checking, generating and hashing
credentials with the policies configured through environment settings.
"""

import json
from collections.abc import Callable
from typing import NoReturn

import click

from credpolicy.core.config import Settings, get_settings
from credpolicy.core.errors import CredentialError
from credpolicy.core.logging import configure_logging
from credpolicy.domain.entities.validation_outcome import ValidationOutcome
from credpolicy.domain.services.passphrase_policy import PassphrasePolicy
from credpolicy.domain.services.password_policy import PasswordPolicy
from credpolicy.domain.services.pin_policy import PinPolicy
from credpolicy.domain.services.secret_generator import (
    DEFAULT_PASSPHRASE_WORDS,
    generate_passphrase,
    generate_password,
    generate_pin,
)
from credpolicy.infrastructure.auth.password_hasher import get_password_hasher


def _settings(ctx: click.Context) -> Settings:
    return ctx.obj["settings"]


def _read_secret(value: str | None, label: str) -> str:
    """Use ``--value`` when given, otherwise prompt without echo."""
    if value is not None:
        return value
    return click.prompt(label, hide_input=True)


def _emit(outcome: ValidationOutcome) -> None:
    click.echo(json.dumps(outcome.to_dict(), indent=2))
    if not outcome.accepted:
        raise SystemExit(1)


def _mask(secret: str) -> str:
    return f"{secret[:4]}..." if len(secret) > 8 else "****"


def _run(produce: Callable[[], str]) -> None:
    try:
        click.echo(produce())
    except CredentialError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="credpolicy")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides CREDPOLICY_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """credpolicy - credential policy engine.

    Validate passwords, passphrases and PINs against configurable
    strength rules before they are hashed or exchanged for tokens.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    ctx.obj = {"settings": settings}


@cli.command("check-password")
@click.option("--value", type=str, default=None, help="Password to check (prompts if not provided)")
@click.pass_context
def check_password(ctx: click.Context, value: str | None) -> None:
    """Check a password against the password policy."""
    policy = PasswordPolicy(_settings(ctx).password_policy_config())
    _emit(policy.validate(_read_secret(value, "Password")))


@cli.command("check-passphrase")
@click.option("--value", type=str, default=None, help="Passphrase to check (prompts if not provided)")
@click.option("--min-bits", type=float, default=None, help="Override the minimum entropy in bits")
@click.pass_context
def check_passphrase(ctx: click.Context, value: str | None, min_bits: float | None) -> None:
    """Check a passphrase and report its estimated strength."""
    config = _settings(ctx).passphrase_policy_config()
    if min_bits is not None:
        config = config.model_copy(update={"min_entropy_bits": min_bits})
    _emit(PassphrasePolicy(config).validate(_read_secret(value, "Passphrase")))


@cli.command("check-pin")
@click.option("--value", type=str, default=None, help="PIN to check (prompts if not provided)")
@click.pass_context
def check_pin(ctx: click.Context, value: str | None) -> None:
    """Check a PIN against the PIN policy."""
    policy = PinPolicy(_settings(ctx).pin_policy_config())
    _emit(policy.validate(_read_secret(value, "PIN")))


@cli.group()
def generate() -> None:
    """Generate a secret that satisfies the configured policy."""


@generate.command("password")
@click.option("--length", type=int, default=None, help="Password length")
@click.pass_context
def generate_password_cmd(ctx: click.Context, length: int | None) -> None:
    """Generate a random password."""
    _run(lambda: generate_password(_settings(ctx).password_policy_config(), length=length))


@generate.command("passphrase")
@click.option("--words", type=int, default=DEFAULT_PASSPHRASE_WORDS, help="Number of words")
@click.option("--separator", type=str, default="-", help="Word separator")
@click.pass_context
def generate_passphrase_cmd(ctx: click.Context, words: int, separator: str) -> None:
    """Generate a random passphrase."""
    config = _settings(ctx).passphrase_policy_config()
    _run(lambda: generate_passphrase(config, words=words, separator=separator))


@generate.command("pin")
@click.pass_context
def generate_pin_cmd(ctx: click.Context) -> None:
    """Generate a random PIN."""
    _run(lambda: generate_pin(_settings(ctx).pin_policy_config()))


@cli.command("hash")
@click.option("--value", type=str, default=None, help="Password to hash (prompts if not provided)")
@click.pass_context
def hash_cmd(ctx: click.Context, value: str | None) -> None:
    """Validate a password and print its hash."""
    settings = _settings(ctx)
    password = value if value is not None else click.prompt(
        "Password", hide_input=True, confirmation_prompt=True
    )

    outcome = PasswordPolicy(settings.password_policy_config()).validate(password)
    if not outcome.accepted:
        _emit(outcome)
    _run(lambda: get_password_hasher(settings).hash(password))


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display effective credpolicy configuration."""
    settings = _settings(ctx)
    special = settings.password_special_charset or "(not required)"

    click.echo(f"""
credpolicy v{settings.app_version}
{'=' * 40}

Password Policy:
  Length:       {settings.password_min_length}-{settings.password_max_length}
  Uppercase:    {settings.password_require_upper}
  Lowercase:    {settings.password_require_lower}
  Digit:        {settings.password_require_digit}
  Specials:     {special}

Passphrase Policy:
  Length:       {settings.passphrase_min_length}-{settings.passphrase_max_length}
  Min Entropy:  {settings.passphrase_min_entropy_bits} bits
  Penalty:      x{settings.passphrase_penalty_multiplier}

PIN Policy:
  Length:       {settings.pin_length}
  Weak Reject:  {settings.pin_reject_weak_patterns}

Hashing:
  Scheme:       {settings.hash_scheme}

Tokens:
  Algorithm:    {settings.jwt_algorithm}
  Secret:       {_mask(settings.jwt_secret_key)}
  Expires In:   {settings.jwt_expires_in_seconds} seconds

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `credpolicy` command is run
    or when using `python -m credpolicy`.
    """
    cli()


if __name__ == "__main__":
    main()
