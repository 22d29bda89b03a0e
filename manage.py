import logging
import subprocess

import click

from resume_builder.app.api.routes.route_logic.anonymous_prompts import (
    prune_anonymous_prompts,
)
from resume_builder.app.api.routes.route_logic.user_crud import (
    get_or_create_anonymous_user,
)
from resume_builder.app.core.config import get_settings
from resume_builder.app.database.database import get_session_local

log = logging.getLogger(__name__)

ALEMBIC_NOT_FOUND = (
    "Error: 'alembic' command not found. Make sure Alembic is installed and in your PATH."
)


def _run_alembic(command: list[str], action: str, success_msg: str) -> None:
    try:
        subprocess.run(command, check=True)
        click.echo(success_msg)
        log.info(success_msg)
    except subprocess.CalledProcessError as e:
        _error_msg = f"An error occurred while {action}: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
    except FileNotFoundError:
        click.echo(ALEMBIC_NOT_FOUND, err=True)
        log.exception(ALEMBIC_NOT_FOUND)


@click.group()
def cli():
    """Management script for the Resume Builder API."""
    pass


@cli.command("generate-migration")
@click.option(
    "-m",
    "--message",
    required=True,
    help="A short message describing the migration.",
)
def generate_migration(message: str):
    """
    Generate a new database migration script.

    This command wraps 'alembic revision --autogenerate'.

    Args:
        message (str): A short message describing the migration.

    """
    _msg = "generate_migration starting"
    log.debug(_msg)
    click.echo("Generating new migration...")
    _run_alembic(
        ["alembic", "revision", "--autogenerate", "-m", message],
        action="generating migration",
        success_msg=f"Successfully generated new migration: {message}",
    )


@cli.command("apply-migrations")
def apply_migrations():
    """Apply all pending migrations to the database ('alembic upgrade head')."""
    _msg = "apply_migrations starting"
    log.debug(_msg)
    click.echo("Applying database migrations...")
    _run_alembic(
        ["alembic", "upgrade", "head"],
        action="applying migrations",
        success_msg="Successfully applied all migrations.",
    )


@cli.command("ensure-anonymous-user")
def ensure_anonymous_user():
    """
    Create the anonymous sentinel account if it does not exist yet.

    Notes:
        1. Account deletion creates the sentinel lazily; this command lets a
           deployment create it up front.
        2. Prints the sentinel's id, or an error message on failure.

    """
    settings = get_settings()
    db = get_session_local()()
    try:
        user = get_or_create_anonymous_user(db, settings.anonymous_user_email)
        _success_msg = f"Anonymous user ready: {user.id}"
        click.echo(_success_msg)
        log.info(_success_msg)
    except Exception as e:
        db.rollback()
        _error_msg = f"Error creating anonymous user: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
    finally:
        db.close()


@cli.command("prune-anonymous-prompts")
@click.option(
    "--keep",
    type=int,
    default=None,
    help="Number of most recent prompts to keep. Defaults to ANONYMOUS_PROMPT_LIMIT.",
)
def prune_prompts(keep: int | None):
    """Delete the oldest anonymous prompts beyond the retention cap."""
    max_entries = keep if keep is not None else get_settings().anonymous_prompt_limit
    db = get_session_local()()
    try:
        deleted = prune_anonymous_prompts(db, max_entries)
        _success_msg = f"Deleted {deleted} anonymous prompts; kept at most {max_entries}."
        click.echo(_success_msg)
        log.info(_success_msg)
    except Exception as e:
        db.rollback()
        _error_msg = f"Error pruning anonymous prompts: {e}"
        click.echo(_error_msg, err=True)
        log.exception(_error_msg)
    finally:
        db.close()


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
