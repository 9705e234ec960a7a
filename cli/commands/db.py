import click
from core.sa.database import Database
from ..utils import db_option

@click.group()
def db():
    """Database management commands"""
    pass

@db.command(name="init")
@db_option
def init(db_url: str):
    """Create all tables that do not exist yet"""
    database = Database(db_url)
    database.init_db()
    click.echo(click.style("Database initialized", fg='green'))

if __name__ == '__main__':
    db()
