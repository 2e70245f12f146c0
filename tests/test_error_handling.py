import pytest
from sqlalchemy.exc import OperationalError

from app.models.budget import Budget
from app.models.expense import Expense


@pytest.mark.asyncio
async def test_store_failure_is_a_generic_500(client, db_session, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", failing_commit)
    r = await client.post("/api/expenses", json={"title": "Lunch", "amount": 25, "category": "Food"})
    assert r.status_code == 500
    assert r.json() == {"message": "Server error"}

    monkeypatch.undo()
    assert db_session.query(Expense).count() == 0


@pytest.mark.asyncio
async def test_malformed_json_is_a_400(client):
    r = await client.post(
        "/api/expenses",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert "message" in r.json()


@pytest.mark.asyncio
async def test_bad_path_id_is_a_400(client):
    r = await client.delete("/api/expenses/not-a-uuid")
    assert r.status_code == 400
    assert "message" in r.json()


@pytest.mark.asyncio
async def test_unknown_route_keeps_envelope(client):
    r = await client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.json() == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_budget_store_failure_is_a_generic_500(client, db_session, monkeypatch):
    def failing_flush(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "flush", failing_flush)
    r = await client.post("/api/budget/set", json={"category": "Food", "limit": 100})
    assert r.status_code == 500
    assert r.json() == {"message": "Server error"}

    monkeypatch.undo()
    assert db_session.query(Budget).count() == 0
