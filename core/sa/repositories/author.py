# core/sa/repositories/author.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import Author

class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def create_author(self, name: str, nationality: Optional[str]) -> Author:
        """Create an author"""
        author = Author(name=name, nationality=nationality)
        self.session.add(author)
        self.session.commit()
        return author

    def get_authors(self) -> List[Author]:
        """Get all authors ordered by ID"""
        return self.session.query(Author).order_by(Author.id).all()

    def get_by_id(self, author_id: int) -> Optional[Author]:
        """Get an author by ID"""
        return self.session.query(Author).filter(Author.id == author_id).first()

    def update_author(self, author_id: int, name: str, nationality: Optional[str]) -> Optional[Author]:
        """Replace an author's name and nationality"""
        author = self.get_by_id(author_id)
        if not author:
            return None

        author.name = name
        author.nationality = nationality
        self.session.commit()
        return author

    def delete_author(self, author_id: int) -> bool:
        """Delete an author, returning whether a row was removed"""
        result = self.session.query(Author).filter(Author.id == author_id).delete()
        self.session.commit()
        return result > 0
