# core/models/catalog.py

from pydantic import BaseModel, Field
from typing import List

class CatalogRecord(BaseModel):
    """Bibliographic data read from one National Library catalog detail page.

    Never persisted. Fields the page does not provide are empty strings.
    """
    title: str = ""
    material: str = ""
    language: str = ""
    isbn_code: str = ""
    dewey: str = ""
    location: str = ""
    uniform_title: str = ""
    publisher: str = ""
    physical_description: str = ""
    general_note: str = ""
    subjects: List[str] = Field(default_factory=list)
    authors: List[str] = Field(default_factory=list)
    cover_image: str = ""
