import click
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy.orm import Session
from core.sa.database import Database

db_option = click.option(
    '--db', 'db_url', default=None,
    help="Database URL (defaults to DATABASE_URL or the DB_* environment variables)"
)

@contextmanager
def open_session(db_url: Optional[str]) -> Iterator[Session]:
    """Open a session on the configured database, creating the schema if needed"""
    database = Database(db_url)
    database.init_db()
    with database.get_db() as session:
        yield session

def print_user(user) -> None:
    """Print a user with their contact lists"""
    click.echo(click.style(f"[{user.id}] ", fg='cyan') + click.style(user.name, fg='green'))
    click.echo(f"  Emails: {', '.join(user.emails) or '-'}")
    click.echo(f"  Phones: {', '.join(user.phones) or '-'}")
