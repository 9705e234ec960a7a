# tests/test_sa/test_repositories/test_author_repository.py
import pytest
from sqlalchemy.sql import text
from core.sa.repositories.author import AuthorRepository

@pytest.fixture
def author_repo(db_session):
    return AuthorRepository(db_session)

def test_create_author(author_repo, db_session):
    """Test that name and nationality are escaped in storage."""
    author = author_repo.create_author("Cecília Meireles", "Brasileira")
    row = db_session.execute(
        text("SELECT nome, nacionalidade FROM Autor WHERE autor_id = :id"), {"id": author.id}
    ).one()
    assert row.nome == "Cec\\ília Meireles"
    assert row.nacionalidade == "Brasileira"

def test_get_authors(author_repo, sample_author):
    author_repo.create_author("Clarice Lispector", "Ucraniana-brasileira")
    authors = author_repo.get_authors()
    assert [a.name for a in authors] == ["Machado de Assis", "Clarice Lispector"]
    assert authors[1].nationality == "Ucraniana-brasileira"

def test_get_by_id(author_repo, sample_author):
    assert author_repo.get_by_id(sample_author.id).name == "Machado de Assis"

def test_get_by_nonexistent_id(author_repo):
    assert author_repo.get_by_id(99999) is None

def test_update_author(author_repo, sample_author):
    updated = author_repo.update_author(sample_author.id, "J. M. Machado de Assis", "Brasileiro")
    assert updated.name == "J. M. Machado de Assis"

def test_update_nonexistent_author(author_repo):
    assert author_repo.update_author(99999, "X", "Y") is None

def test_delete_author(author_repo, sample_author):
    assert author_repo.delete_author(sample_author.id) is True
    assert author_repo.get_by_id(sample_author.id) is None
    assert author_repo.delete_author(sample_author.id) is False
