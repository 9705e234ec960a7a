# tests/test_sa/test_repositories/test_category_repository.py

import pytest
from sqlalchemy.sql import text
from core.sa.repositories.category import CategoryRepository
from core.sa.models import Category

@pytest.fixture
def category_repo(db_session):
    """Fixture to create a CategoryRepository instance."""
    return CategoryRepository(db_session)

def test_create_category(category_repo):
    category = category_repo.create_category("Poesia")
    assert category.id is not None
    assert category.name == "Poesia"

def test_create_category_stores_escaped_name(category_repo, db_session):
    category = category_repo.create_category("Ficção científica")
    stored = db_session.execute(
        text("SELECT nome FROM Categoria WHERE categoria_id = :id"), {"id": category.id}
    ).scalar()
    assert stored == "Fic\\ç\\ão cient\\ífica"

def test_create_duplicate_category(category_repo, sample_category):
    """Test that a second category with the same name is rejected."""
    with pytest.raises(ValueError, match="already exists"):
        category_repo.create_category(sample_category.name)

def test_get_categories(category_repo):
    category_repo.create_category("B")
    category_repo.create_category("A")
    names = [c.name for c in category_repo.get_categories()]
    assert names == ["B", "A"]

def test_get_by_id(category_repo, sample_category):
    fetched = category_repo.get_by_id(sample_category.id)
    assert fetched is not None
    assert fetched.name == "Ficção"

def test_get_by_nonexistent_id(category_repo):
    assert category_repo.get_by_id(99999) is None

def test_get_by_name(category_repo, sample_category):
    """Lookups by name match the escaped stored value."""
    assert category_repo.get_by_name("Ficção").id == sample_category.id
    assert category_repo.get_by_name("Ficcao") is None

def test_update_category(category_repo, sample_category):
    updated = category_repo.update_category(sample_category.id, "Romance")
    assert updated.name == "Romance"

def test_update_category_to_same_name(category_repo, sample_category):
    """Keeping a category's own name is not a collision."""
    updated = category_repo.update_category(sample_category.id, "Ficção")
    assert updated.name == "Ficção"

def test_update_category_to_taken_name(category_repo, sample_category):
    other = category_repo.create_category("Drama")
    with pytest.raises(ValueError):
        category_repo.update_category(other.id, "Ficção")

def test_update_nonexistent_category(category_repo):
    assert category_repo.update_category(99999, "Nothing") is None

def test_delete_category(category_repo, sample_category, db_session):
    assert category_repo.delete_category(sample_category.id) is True
    assert db_session.query(Category).count() == 0

def test_delete_nonexistent_category(category_repo):
    assert category_repo.delete_category(99999) is False

def test_delete_category_with_books(category_repo, sample_book, db_session):
    """Books keep their category id after the category is deleted."""
    category_id = sample_book.category_id
    assert category_repo.delete_category(category_id) is True
    remaining = db_session.execute(
        text("SELECT categoria_id FROM Livro WHERE livro_id = :id"),
        {"id": sample_book.id}
    ).scalar()
    assert remaining == category_id
