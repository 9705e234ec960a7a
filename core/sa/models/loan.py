# core/sa/models/loan.py
from datetime import date
from sqlalchemy import Integer, Date
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

class Loan(Base):
    __tablename__ = 'Emprestimo'

    id: Mapped[int] = mapped_column('emprestimo_id', Integer, primary_key=True)
    reservation_id: Mapped[int] = mapped_column('reserva_id', Integer, nullable=False)
    loan_date: Mapped[date] = mapped_column('data_emprestimo', Date, nullable=False)
    expected_return_date: Mapped[date] = mapped_column('data_devolucao_prevista', Date, nullable=False)
    actual_return_date: Mapped[date | None] = mapped_column('data_devolucao_real', Date, nullable=True)

    # Relationships
    reservation = relationship(
        'Reservation', primaryjoin='foreign(Loan.reservation_id) == Reservation.id', back_populates='loans'
    )
