# core/sa/repositories/reservation.py
from typing import List, Optional
from sqlalchemy.orm import Session
from core.sa.models import Reservation

class ReservationRepository:
    """Repository for managing Reservation entities."""

    def __init__(self, session: Session):
        self.session = session

    def create_reservation(self, user_id: int, book_id: int) -> Reservation:
        """Reserve a book for a user. The status starts as 'pending'."""
        reservation = Reservation(user_id=user_id, book_id=book_id)
        self.session.add(reservation)
        self.session.commit()
        return reservation

    def get_reservations(self) -> List[Reservation]:
        return self.session.query(Reservation).order_by(Reservation.id).all()

    def get_by_id(self, reservation_id: int) -> Optional[Reservation]:
        return self.session.query(Reservation).filter(Reservation.id == reservation_id).first()

    def get_reservations_by_user(self, user_id: int) -> List[Reservation]:
        """Get all reservations made by a user"""
        return (self.session.query(Reservation)
                .filter(Reservation.user_id == user_id)
                .order_by(Reservation.id)
                .all())

    def update_status(self, reservation_id: int, status: str) -> Optional[Reservation]:
        """Set the status of a reservation.
        
        Args:
            reservation_id: The ID of the reservation
            status: The new status
            
        Returns:
            The updated Reservation object if found, None otherwise
        """
        reservation = self.get_by_id(reservation_id)
        if not reservation:
            return None

        reservation.status = status
        self.session.commit()
        return reservation

    def delete_reservation(self, reservation_id: int) -> bool:
        result = self.session.query(Reservation).filter(Reservation.id == reservation_id).delete()
        self.session.commit()
        return result > 0
