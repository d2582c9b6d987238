#!/usr/bin/env python3
"""passpolicy - CLI entry point."""

import json
import sys
from typing import NoReturn

import click
import structlog

from . import __version__
from .config import Settings, get_settings, policy_from_settings
from .exceptions import ConfigurationError
from .logging_filter import configure_logging
from .policy import PasswordPolicy
from .validator import evaluate_password

EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2

logger = structlog.get_logger()


def _config_error(error: ValueError) -> NoReturn:
    click.echo(f"Configuration error: {error}", err=True)
    sys.exit(EXIT_CONFIG_ERROR)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ConfigurationError as e:
        _config_error(e)


def _load_policy() -> PasswordPolicy:
    try:
        return policy_from_settings(_load_settings())
    except ConfigurationError as e:
        logger.error("Invalid password policy configuration", error=str(e))
        _config_error(e)


@click.group()
@click.version_option(version=__version__, prog_name="passpolicy")
def cli() -> None:
    """passpolicy - check passwords against the account password policy.

    The policy is read from PASSWORD_* environment variables (or a .env file)
    and falls back to the standard rules.
    """
    settings = _load_settings()
    configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)


@cli.command()
@click.argument("password", required=False)
@click.option("--min-length", type=click.IntRange(min=0), default=None, help="Override minimum length")
@click.option("--max-length", type=click.IntRange(min=0), default=None, help="Override maximum length")
@click.option("--no-uppercase", is_flag=True, help="Do not require an uppercase letter")
@click.option("--no-lowercase", is_flag=True, help="Do not require a lowercase letter")
@click.option("--no-numbers", is_flag=True, help="Do not require a number")
@click.option("--no-special", is_flag=True, help="Do not require a special character")
def check(
    password: str | None,
    min_length: int | None,
    max_length: int | None,
    no_uppercase: bool,
    no_lowercase: bool,
    no_numbers: bool,
    no_special: bool,
) -> None:
    """Check a password and print the result as JSON.

    Prompts for the password (without echo) when it is not given as an
    argument. Exits with status 1 when the password is rejected.
    """
    policy = _load_policy()

    overrides: dict[str, object] = {}
    if min_length is not None:
        overrides["min_length"] = min_length
    if max_length is not None:
        overrides["max_length"] = max_length
    if no_uppercase:
        overrides["require_uppercase"] = False
    if no_lowercase:
        overrides["require_lowercase"] = False
    if no_numbers:
        overrides["require_numbers"] = False
    if no_special:
        overrides["require_special"] = False

    if overrides:
        # model_copy skips validation, so rebuild to re-check the length bounds
        try:
            policy = PasswordPolicy(**{**policy.model_dump(), **overrides})
        except ValueError as e:
            _config_error(e)

    if password is None:
        password = click.prompt("Password", hide_input=True)

    response = evaluate_password(password, policy)
    click.echo(json.dumps(response.to_wire(), indent=2))

    if not response.is_valid:
        sys.exit(EXIT_INVALID)


@cli.command("policy")
def show_policy() -> None:
    """Print the effective password policy as JSON.

    Only the number of forbidden words is shown, not the words themselves.
    """
    policy = _load_policy()
    data = policy.model_dump(exclude={"forbidden_words"})
    data["forbidden_word_count"] = len(policy.forbidden_words)
    click.echo(json.dumps(data, indent=2))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
