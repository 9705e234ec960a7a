# core/scrapers/base_scraper.py

from bs4 import BeautifulSoup
import logging
from typing import Any, Optional
from abc import ABC, abstractmethod
import click
from ..utils.browser import PageRenderer

class BaseScraper(ABC):
    """Base class for all scrapers providing common functionality."""

    def __init__(self, renderer: Optional[PageRenderer] = None):
        """
        Initialize the base scraper.

        Args:
            renderer: Object with a render(url) -> html method.
                      Defaults to a headless browser PageRenderer.
        """
        self.renderer = renderer or PageRenderer()
        self._setup_logging()

    def _setup_logging(self):
        """Set up logging for the scraper."""
        self.logger = logging.getLogger(self.__class__.__name__)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def download_url(self, url: str) -> str:
        """
        Render a URL once. There is no retry; fetch errors propagate.

        Args:
            url: The URL to render.

        Returns:
            The rendered HTML.
        """
        try:
            if click.get_current_context().find_root().params.get('verbose', False):
                click.echo(click.style(f"Downloading: {url}", fg='cyan'))
        except RuntimeError:
            # No Click context available, skip verbose output
            pass

        self.logger.info(f"Fetching {url}")
        return self.renderer.render(url)

    def parse_html(self, html: str) -> BeautifulSoup:
        """
        Parse HTML content into a BeautifulSoup object.

        Args:
            html: The HTML content to parse.

        Returns:
            A BeautifulSoup object. Empty input gives an empty document.
        """
        return BeautifulSoup(html or '', 'html.parser')

    def clean_html(self, html: str) -> str:
        """
        Clean HTML content before parsing.
        Can be overridden by derived classes for specific cleaning needs.

        Args:
            html: The HTML content to clean.

        Returns:
            The cleaned HTML as a string.
        """
        return html.strip()

    @abstractmethod
    def get_url(self, identifier: str) -> str:
        """
        Get the URL for an identifier.
        Must be implemented by derived classes.

        Args:
            identifier: The identifier to get the URL for.

        Returns:
            The constructed URL as a string.
        """
        pass

    @abstractmethod
    def extract_data(self, soup: BeautifulSoup, identifier: str) -> Any:
        """
        Extract data from parsed HTML.
        Must be implemented by derived classes.

        Args:
            soup: The parsed HTML.
            identifier: The identifier being scraped.

        Returns:
            The extracted data.
        """
        pass

    def scrape(self, identifier: str) -> Any:
        """
        Main scraping method that coordinates the scraping process.

        Args:
            identifier: The identifier of the item to scrape.

        Returns:
            Whatever extract_data produces for the page.
        """
        url = self.get_url(identifier)
        html = self.download_url(url)
        soup = self.parse_html(self.clean_html(html))
        return self.extract_data(soup, identifier)
