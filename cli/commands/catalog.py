import json
import click
from playwright.sync_api import Error as PlaywrightError
from core.scrapers.catalog_scraper import fetch_catalog_record

@click.group()
def catalog():
    """National Library catalog commands"""
    pass

@catalog.command(name="fetch")
@click.argument('identifier')
@click.option('--timeout', type=float, default=None, help="Navigation timeout in seconds (default: 30)")
@click.option('--pretty', is_flag=True, help="Pretty-print JSON output")
def fetch(identifier: str, timeout: float, pretty: bool):
    """
    Fetch a catalog record and print it as JSON.

    IDENTIFIER is a detail page URL or a numeric record ID.
    """
    try:
        record = fetch_catalog_record(identifier, timeout=timeout)
    except PlaywrightError as e:
        raise click.ClickException(f"Could not fetch {identifier}: {e}")
    click.echo(json.dumps(record.model_dump(), ensure_ascii=False, indent=2 if pretty else None))

if __name__ == '__main__':
    catalog()
