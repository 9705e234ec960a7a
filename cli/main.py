# cli/main.py
import logging
import click
from .commands.catalog import catalog
from .commands.db import db
from .commands.user import user
from .commands.category import category

@click.group()
@click.option('--verbose', '-v', is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Library Companion CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

cli.add_command(catalog)
cli.add_command(db)
cli.add_command(user)
cli.add_command(category)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
