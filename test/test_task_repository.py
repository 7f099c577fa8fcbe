# test/test_task_repository.py
import pytest

from errors import NotFoundError
from repositories.task_filters import build_task_filter
from repositories.task_repository import TaskRepository


@pytest.fixture()
def repo(db) -> TaskRepository:
    return TaskRepository(db)


def test_shopping_example_is_scoped_by_owner(repo):
    task = repo.create("U1", {"title": "Buy milk", "category": "shopping", "priority": "low"})

    mine = repo.find("U1", build_task_filter("U1", category="shopping"))
    theirs = repo.find("U2", build_task_filter("U2", category="shopping"))

    assert [t["id"] for t in mine] == [task["id"]]
    assert theirs == []


def test_search_in_title_or_description(repo):
    by_title = repo.create("U1", {"title": "Llamar al banco", "description": ""})
    by_desc = repo.create("U1", {"title": "Trámite", "description": "pedir cita en el BANCO"})
    repo.create("U1", {"title": "Correr", "description": "5km"})

    found = repo.find("U1", build_task_filter("U1", search="banco"))

    assert {t["id"] for t in found} == {by_title["id"], by_desc["id"]}
    assert repo.find("U1", build_task_filter("U1", search="piscina")) == []


def test_create_round_trip(repo):
    data = {
        "title": "Vacuna",
        "description": "Refuerzo anual",
        "category": "health",
        "priority": "high",
        "status": "pending",
        "due_date": "2026-10-30",
    }
    created = repo.create("U1", data)

    found = repo.find("U1")

    assert len(found) == 1
    assert {k: found[0][k] for k in data} == data
    assert found[0]["id"] == created["id"]
    assert "_id" not in found[0]


def test_get_wrong_owner_is_not_found(repo):
    task = repo.create("U1", {"title": "x"})

    with pytest.raises(NotFoundError):
        repo.get(task["id"], "U2")


def test_update_wrong_owner_is_not_found_and_untouched(repo):
    task = repo.create("U1", {"title": "original"})

    with pytest.raises(NotFoundError):
        repo.update(task["id"], "U2", {"title": "cambiado"})

    assert repo.get(task["id"], "U1")["title"] == "original"


def test_update_ignores_server_fields(repo):
    task = repo.create("U1", {"title": "x"})

    updated = repo.update(task["id"], "U1", {"title": "y", "user_id": "U2", "created_at": "1999-01-01"})

    assert updated["title"] == "y"
    assert updated["user_id"] == "U1"
    assert updated["created_at"] == task["created_at"]


def test_delete_nonexistent_is_not_found(repo):
    with pytest.raises(NotFoundError):
        repo.delete("64b7f0c2a1b2c3d4e5f60718", "U1")
    with pytest.raises(NotFoundError):
        repo.delete("basura", "U1")


def test_delete_removes_only_that_task(repo):
    keep = repo.create("U1", {"title": "keep"})
    gone = repo.create("U1", {"title": "gone"})

    repo.delete(gone["id"], "U1")

    assert [t["id"] for t in repo.find("U1")] == [keep["id"]]


def test_find_is_scoped_by_owner_even_without_filter(repo):
    mine = repo.create("U1", {"title": "mía"})
    repo.create("U2", {"title": "ajena"})

    assert [t["id"] for t in repo.find("U1", {})] == [mine["id"]]
    assert [t["user_id"] for t in repo.find("U1", {"user_id": "U2"})] == ["U1"]
