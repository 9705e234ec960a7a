import click
from core.sa.repositories.category import CategoryRepository
from ..utils import db_option, open_session

@click.group()
def category():
    """Category management commands"""
    pass

@category.command(name="add")
@db_option
@click.argument('name')
def add(db_url: str, name: str):
    """Create a category"""
    with open_session(db_url) as session:
        try:
            created = CategoryRepository(session).create_category(name)
        except ValueError as e:
            raise click.ClickException(str(e))
        click.echo(click.style(f"Created category {created.id}: {created.name}", fg='green'))

@category.command(name="list")
@db_option
def list_categories(db_url: str):
    """List all categories"""
    with open_session(db_url) as session:
        categories = CategoryRepository(session).get_categories()
        if not categories:
            click.echo("No categories found.")
            return
        for found in categories:
            click.echo(f" - [{found.id}] {found.name}")

if __name__ == '__main__':
    category()
