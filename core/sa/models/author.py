# core/sa/models/author.py
from sqlalchemy import Integer, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base
from core.utils.codec import EscapedText

class Author(Base):
    __tablename__ = 'Autor'

    id: Mapped[int] = mapped_column('autor_id', Integer, primary_key=True)
    name: Mapped[str] = mapped_column('nome', EscapedText(255), nullable=False)
    nationality: Mapped[str | None] = mapped_column('nacionalidade', EscapedText(255), nullable=True)

    __table_args__ = (
        # Search index
        Index('idx_autor_nome', 'nome'),
    )
