# core/sa/repositories/loan.py
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from core.sa.models import Loan

class LoanRepository:
    """Repository for managing Loan entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_loan(self, reservation_id: int, loan_date: date, expected_return_date: date) -> Loan:
        """Open a loan for a reservation.
        
        Args:
            reservation_id: ID of the reservation being fulfilled
            loan_date: Date the book left the library
            expected_return_date: Date the book is due back
            
        Returns:
            The created Loan object
        """
        loan = Loan(
            reservation_id=reservation_id,
            loan_date=loan_date,
            expected_return_date=expected_return_date
        )
        self.session.add(loan)
        self.session.commit()
        return loan

    def get_loans(self) -> List[Loan]:
        """Get all loans ordered by ID"""
        return self.session.query(Loan).order_by(Loan.id).all()

    def get_by_id(self, loan_id: int) -> Optional[Loan]:
        """Get a loan by ID"""
        return self.session.query(Loan).filter(Loan.id == loan_id).first()

    def get_open_loans(self) -> List[Loan]:
        """Get loans whose book has not been returned yet"""
        return (self.session.query(Loan)
                .filter(Loan.actual_return_date.is_(None))
                .order_by(Loan.expected_return_date)
                .all())

    def update_return(self, loan_id: int, actual_return_date: Optional[date]) -> Optional[Loan]:
        """Record the date a loaned book came back.
        
        Args:
            loan_id: The ID of the loan
            actual_return_date: The return date, or None to reopen the loan
            
        Returns:
            The updated Loan object if found, None otherwise
        """
        loan = self.get_by_id(loan_id)
        if not loan:
            return None

        loan.actual_return_date = actual_return_date
        self.session.commit()
        return loan

    def delete_loan(self, loan_id: int) -> bool:
        """Delete a loan, returning whether a row was removed"""
        result = self.session.query(Loan).filter(Loan.id == loan_id).delete()
        self.session.commit()
        return result > 0
