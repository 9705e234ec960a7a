# core/sa/models/reservation.py
from datetime import datetime, UTC
from sqlalchemy import Integer, DateTime
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base
from core.utils.codec import EscapedText

class Reservation(Base):
    __tablename__ = 'Reserva'

    id: Mapped[int] = mapped_column('reserva_id', Integer, primary_key=True)
    # Plain integer references: no database constraint, so deletes never cascade or fail
    user_id: Mapped[int] = mapped_column('usuario_id', Integer, nullable=False)
    book_id: Mapped[int] = mapped_column('livro_id', Integer, nullable=False)
    status: Mapped[str] = mapped_column(EscapedText(50), nullable=False, default='pending')
    reserved_at: Mapped[datetime] = mapped_column('data_reserva', DateTime, default=lambda: datetime.now(UTC))

    # Relationships
    user = relationship(
        'User', primaryjoin='foreign(Reservation.user_id) == User.id', back_populates='reservations'
    )
    book = relationship(
        'Book', primaryjoin='foreign(Reservation.book_id) == Book.id', back_populates='reservations'
    )
    loans = relationship(
        'Loan', primaryjoin='foreign(Loan.reservation_id) == Reservation.id',
        back_populates='reservation', passive_deletes='all'
    )
