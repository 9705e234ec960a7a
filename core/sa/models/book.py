# core/sa/models/book.py
from sqlalchemy import Integer, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base
from core.utils.codec import EscapedText

class Book(Base):
    __tablename__ = 'Livro'

    id: Mapped[int] = mapped_column('livro_id', Integer, primary_key=True)
    title: Mapped[str] = mapped_column('titulo', EscapedText(255), nullable=False)
    publication_year: Mapped[int | None] = mapped_column('ano_publicacao', Integer, nullable=True)
    publisher: Mapped[str | None] = mapped_column('editora', EscapedText(255), nullable=True)
    # Plain integer references: no database constraint, so deletes never cascade or fail
    category_id: Mapped[int | None] = mapped_column('categoria_id', Integer, nullable=True)

    # Relationships
    category = relationship(
        'Category', primaryjoin='foreign(Book.category_id) == Category.id', back_populates='books'
    )
    reservations = relationship(
        'Reservation', primaryjoin='foreign(Reservation.book_id) == Book.id',
        back_populates='book', passive_deletes='all'
    )

    __table_args__ = (
        Index('idx_livro_titulo', 'titulo'),
    )

    def __repr__(self):
        return f"<Book(id={self.id}, title={self.title!r})>"
