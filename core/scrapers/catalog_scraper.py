# core/scrapers/catalog_scraper.py
import os
import re
from typing import List, Optional
from bs4 import BeautifulSoup
from dotenv import find_dotenv, load_dotenv
from .base_scraper import BaseScraper
from ..models.catalog import CatalogRecord
from ..utils.browser import PageRenderer

CATALOG_BASE_URL = 'https://acervo.bn.gov.br'
DETAIL_URL = CATALOG_BASE_URL + '/Sophia_web/acervo/detalhe/{}'

# Single-value fields: first matching element, trimmed text
FIELD_SELECTORS = {
    'title': 'h1.titulo[itemprop="name"]',
    'material': 'p[itemprop="genre"]',
    'language': 'p[itemprop="inLanguage"]',
    'isbn_code': 'p[itemprop="isbn"]',
    'dewey': '.classifDewey',
    'location': '.localizacao',
    'uniform_title': '.outrosTitulos',
    'publisher': 'p[itemprop="publisher"]',
    'physical_description': 'p[itemprop="numberOfPages"]',
    'general_note': '.texto-completo',
}

# List fields: every matching element, in document order
LIST_SELECTORS = {
    'subjects': 'span[itemprop="about"] a',
    'authors': 'span[itemprop="name"] a',
}

COVER_SELECTOR = 'img[itemprop="image"]'


class CatalogScraper(BaseScraper):
    """Scrapes a record detail page from the National Library catalog"""

    def get_url(self, identifier: str) -> str:
        """Accept either a full detail page URL or a numeric record ID"""
        identifier = str(identifier).strip()
        if re.fullmatch(r'\d+', identifier):
            return DETAIL_URL.format(identifier)
        return identifier

    def extract_data(self, soup: BeautifulSoup, identifier: str) -> CatalogRecord:
        """
        Map a detail page to a CatalogRecord.
        Expected output:
        {
            'title': str,
            'material': str,
            'language': str,
            'isbn_code': str,
            'dewey': str,
            'location': str,
            'uniform_title': str,
            'publisher': str,
            'physical_description': str,
            'general_note': str,
            'subjects': [str],
            'authors': [str],
            'cover_image': str
        }
        Missing elements give empty strings or empty lists.
        """
        data = {field: self._extract_text(soup, selector)
                for field, selector in FIELD_SELECTORS.items()}
        data.update({field: self._extract_list(soup, selector)
                     for field, selector in LIST_SELECTORS.items()})
        data['cover_image'] = self._extract_cover_url(soup)

        if not data['title']:
            self.logger.warning(f"No title found for {identifier}")
        return CatalogRecord(**data)

    def _extract_text(self, soup: BeautifulSoup, selector: str) -> str:
        element = soup.select_one(selector)
        if element is None:
            return ''
        return element.get_text().strip()

    def _extract_list(self, soup: BeautifulSoup, selector: str) -> List[str]:
        return [element.get_text().strip() for element in soup.select(selector)]

    def _extract_cover_url(self, soup: BeautifulSoup) -> str:
        """Absolute cover image URL, or '' when the page has no cover"""
        image = soup.select_one(COVER_SELECTOR)
        if image is None or not image.get('src'):
            return ''
        return CATALOG_BASE_URL + image['src']


def fetch_catalog_record(url: str, timeout: Optional[float] = None) -> CatalogRecord:
    """Fetch one catalog detail page and return its record.

    Args:
        url: Detail page URL or numeric record ID
        timeout: Navigation timeout in seconds. Defaults to CATALOG_TIMEOUT
                 from the environment or a .env file, or 30.
    """
    if timeout is None:
        load_dotenv(find_dotenv(usecwd=True))
        timeout = float(os.getenv('CATALOG_TIMEOUT', '30'))
    scraper = CatalogScraper(PageRenderer(timeout=timeout))
    return scraper.scrape(url)
