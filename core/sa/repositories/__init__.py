# core/sa/repositories/__init__.py
from .user import UserRepository
from .category import CategoryRepository
from .author import AuthorRepository
from .book import BookRepository
from .reservation import ReservationRepository
from .loan import LoanRepository

__all__ = [
    'UserRepository',
    'CategoryRepository',
    'AuthorRepository',
    'BookRepository',
    'ReservationRepository',
    'LoanRepository'
]
