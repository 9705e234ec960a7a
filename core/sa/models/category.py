# core/sa/models/category.py
from sqlalchemy import Integer
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base
from core.utils.codec import EscapedText

class Category(Base):
    __tablename__ = 'Categoria'

    id: Mapped[int] = mapped_column('categoria_id', Integer, primary_key=True)
    name: Mapped[str] = mapped_column('nome', EscapedText(255), nullable=False, unique=True)

    # Relationships
    books = relationship(
        'Book', primaryjoin='foreign(Book.category_id) == Category.id',
        back_populates='category', passive_deletes='all'
    )
