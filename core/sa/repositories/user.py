# core/sa/repositories/user.py
import logging
from typing import Iterable, List, Optional, Set, Tuple
from sqlalchemy.orm import Session
from core.sa.models import User

logger = logging.getLogger(__name__)


def filter_taken(candidates: Iterable[str], taken: Set[str]) -> List[str]:
    """Drop candidates already stored for another user, keeping the given order.

    Repeats inside candidates are not collapsed.
    """
    return [value for value in candidates if value not in taken]


class UserRepository:
    """Repository for managing User entities.

    Emails and phone numbers are unique across all users: on every write the
    candidate lists are checked against the contacts of every other user and
    colliding values are silently dropped. The check and the write run in
    the same transaction but take no lock, so concurrent writers can still
    race past each other.

    Candidates are compared with the decoded (unescaped) stored values, so a
    legacy row holding a contact in non-canonical, unescaped form still blocks
    that contact.
    """

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _taken_contacts(self, exclude_id: Optional[int] = None) -> Tuple[Set[str], Set[str]]:
        """Collect every stored email and phone, optionally skipping one user"""
        query = self.session.query(User.emails, User.phones)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)

        emails: Set[str] = set()
        phones: Set[str] = set()
        for user_emails, user_phones in query:
            emails.update(user_emails)
            phones.update(user_phones)
        return emails, phones

    def _unique_contacts(
        self,
        emails: Iterable[str],
        phones: Iterable[str],
        exclude_id: Optional[int] = None
    ) -> Tuple[List[str], List[str]]:
        taken_emails, taken_phones = self._taken_contacts(exclude_id)
        emails = list(emails)
        phones = list(phones)
        unique_emails = filter_taken(emails, taken_emails)
        unique_phones = filter_taken(phones, taken_phones)

        dropped = len(emails) - len(unique_emails) + len(phones) - len(unique_phones)
        if dropped:
            logger.info(f"Dropped {dropped} contact value(s) already used by another user")
        return unique_emails, unique_phones

    def create_user(self, name: str, emails: Iterable[str], phones: Iterable[str]) -> User:
        """Create a new user.

        Args:
            name: The name of the user
            emails: Candidate email addresses
            phones: Candidate phone numbers

        Returns:
            The created User object, holding only the contacts no other user has
        """
        unique_emails, unique_phones = self._unique_contacts(emails, phones)

        user = User(name=name, emails=unique_emails, phones=unique_phones)
        self.session.add(user)
        self.session.commit()
        logger.debug(f"Created user {user.id}")
        return user

    def get_users(self) -> List[User]:
        """Get all users ordered by ID"""
        return self.session.query(User).order_by(User.id).all()

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID.

        Args:
            user_id: The ID of the user

        Returns:
            The User object if found, None otherwise
        """
        return self.session.query(User).filter(User.id == user_id).first()

    def update_user(
        self,
        user_id: int,
        name: str,
        emails: Iterable[str],
        phones: Iterable[str]
    ) -> Optional[User]:
        """Replace a user's name and contact lists.

        The user's own current contacts do not count as collisions.

        Args:
            user_id: The ID of the user to update
            name: The new name for the user
            emails: Candidate email addresses
            phones: Candidate phone numbers

        Returns:
            The updated User object if found, None otherwise
        """
        user = self.get_by_id(user_id)
        if not user:
            return None

        unique_emails, unique_phones = self._unique_contacts(emails, phones, exclude_id=user_id)
        user.name = name
        user.emails = unique_emails
        user.phones = unique_phones
        self.session.commit()
        logger.debug(f"Updated user {user_id}")
        return user

    def delete_user(self, user_id: int) -> bool:
        """Delete a user.

        Args:
            user_id: The ID of the user to delete

        Returns:
            True if the user was deleted, False if not found
        """
        result = self.session.query(User).filter(User.id == user_id).delete()
        self.session.commit()
        return result > 0
