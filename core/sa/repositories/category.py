# core/sa/repositories/category.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from core.sa.models import Category

logger = logging.getLogger(__name__)

class CategoryRepository:
    """Repository for managing Category entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def _ensure_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        query = self.session.query(Category).filter(Category.name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            raise ValueError(f"Category with name '{name}' already exists")

    def create_category(self, name: str) -> Category:
        """Create a new category.
        
        Args:
            name: The name of the category
            
        Returns:
            The created Category object
            
        Raises:
            ValueError: If a category with the given name already exists
        """
        self._ensure_name_available(name)

        category = Category(name=name)
        self.session.add(category)
        self.session.commit()
        logger.debug(f"Created category {category.id}")
        return category

    def get_categories(self) -> List[Category]:
        """Get all categories ordered by ID"""
        return self.session.query(Category).order_by(Category.id).all()

    def get_by_id(self, category_id: int) -> Optional[Category]:
        """Get a category by ID.
        
        Args:
            category_id: The ID of the category
            
        Returns:
            The Category object if found, None otherwise
        """
        return self.session.query(Category).filter(Category.id == category_id).first()

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get a category by its name"""
        return self.session.query(Category).filter(Category.name == name).first()

    def update_category(self, category_id: int, name: str) -> Optional[Category]:
        """Rename a category.
        
        Args:
            category_id: The ID of the category to update
            name: The new name for the category
            
        Returns:
            The updated Category object if found, None otherwise
            
        Raises:
            ValueError: If another category already uses the name
        """
        category = self.get_by_id(category_id)
        if not category:
            return None

        self._ensure_name_available(name, exclude_id=category_id)
        category.name = name
        self.session.commit()
        return category

    def delete_category(self, category_id: int) -> bool:
        """Delete a category. Books pointing at it are left untouched.
        
        Args:
            category_id: The ID of the category to delete
            
        Returns:
            True if the category was deleted, False if not found
        """
        result = self.session.query(Category).filter(Category.id == category_id).delete()
        self.session.commit()
        return result > 0
