# core/sa/models/user.py
from typing import List
from sqlalchemy import Integer
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base
from core.utils.codec import EscapedText, EscapedList

class User(Base):
    __tablename__ = 'Usuario'

    id: Mapped[int] = mapped_column('usuario_id', Integer, primary_key=True)
    name: Mapped[str] = mapped_column('nome', EscapedText(255), nullable=False)
    # JSON arrays of escaped values; uniqueness across users is enforced by UserRepository
    emails: Mapped[List[str]] = mapped_column('email', EscapedList, nullable=False, default=lambda: [])
    phones: Mapped[List[str]] = mapped_column('telefone', EscapedList, nullable=False, default=lambda: [])

    # Relationships
    reservations = relationship(
        'Reservation', primaryjoin='foreign(Reservation.user_id) == User.id',
        back_populates='user', passive_deletes='all'
    )

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name!r})>"
