import pytest

API = "/api/goals"


async def create_goal(client, **overrides):
    payload = {
        "title": "Emergency fund",
        "targetAmount": 1000,
        "deadline": "2027-06-30",
        "category": "emergency",
        "priority": "high",
    }
    payload.update(overrides)
    r = await client.post(API, json=payload)
    assert r.status_code == 201, r.text
    return r.json()


@pytest.mark.asyncio
async def test_create_goal_starts_empty(client, user):
    goal = await create_goal(client)
    assert goal["currentAmount"] == 0
    assert goal["targetAmount"] == 1000
    assert goal["isCompleted"] is False
    assert goal["completedAt"] is None
    assert goal["userId"] == str(user.id)


@pytest.mark.asyncio
async def test_priority_defaults_to_medium(client):
    r = await client.post(
        API,
        json={"title": "Trip", "targetAmount": 500, "deadline": "2027-01-01", "category": "savings"},
    )
    assert r.status_code == 201
    assert r.json()["priority"] == "medium"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": " "}, "Title is required"),
        ({"targetAmount": 0}, "Target amount must be greater than 0"),
        ({"targetAmount": 1e30}, "Amount is too large"),
        ({"deadline": ""}, "Valid deadline is required"),
        ({"category": "vacation"}, "Invalid category"),
        ({"priority": "urgent"}, "Invalid priority"),
    ],
)
async def test_create_goal_validation(client, overrides, message):
    payload = {
        "title": "Fund",
        "targetAmount": 100,
        "deadline": "2027-01-01",
        "category": "savings",
        **overrides,
    }
    r = await client.post(API, json=payload)
    assert r.status_code == 400
    assert r.json() == {"message": message}


@pytest.mark.asyncio
async def test_progress_accumulates_and_completes(client):
    goal = await create_goal(client, targetAmount=100)

    r = await client.put(f"{API}/{goal['id']}/progress", json={"amount": 60})
    assert r.json()["currentAmount"] == 60
    assert r.json()["isCompleted"] is False

    r = await client.put(f"{API}/{goal['id']}/progress", json={"amount": 40})
    body = r.json()
    assert body["currentAmount"] == 100
    assert body["isCompleted"] is True
    assert body["completedAt"] is not None


@pytest.mark.asyncio
async def test_progress_rejects_negative(client):
    goal = await create_goal(client)
    r = await client.put(f"{API}/{goal['id']}/progress", json={"amount": -5})
    assert r.status_code == 400
    assert r.json() == {"message": "Amount must be a positive number"}


@pytest.mark.asyncio
async def test_partial_update(client):
    goal = await create_goal(client)
    r = await client.put(f"{API}/{goal['id']}", json={"title": "Rainy day", "priority": "low"})
    body = r.json()
    assert body["title"] == "Rainy day"
    assert body["priority"] == "low"
    assert body["targetAmount"] == 1000
    assert body["category"] == "emergency"


@pytest.mark.asyncio
async def test_update_rejects_blank_title(client):
    goal = await create_goal(client)
    r = await client.put(f"{API}/{goal['id']}", json={"title": ""})
    assert r.status_code == 400
    assert r.json() == {"message": "Title cannot be empty"}


@pytest.mark.asyncio
async def test_delete_and_not_found(client):
    goal = await create_goal(client)
    r = await client.delete(f"{API}/{goal['id']}")
    assert r.json() == {"message": "Goal deleted successfully"}
    assert (await client.get(API)).json() == []

    r = await client.delete(f"{API}/{goal['id']}")
    assert r.status_code == 404
    assert r.json() == {"message": "Goal not found"}


@pytest.mark.asyncio
async def test_goals_are_per_user(client, other_user, act_as):
    goal = await create_goal(client)
    act_as(other_user)
    assert (await client.get(API)).json() == []
    r = await client.put(f"{API}/{goal['id']}/progress", json={"amount": 10})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_progress_rejects_out_of_range_amount(client):
    goal = await create_goal(client)
    r = await client.put(f"{API}/{goal['id']}/progress", json={"amount": 1e30})
    assert r.status_code == 400
    assert r.json() == {"message": "Amount is too large"}
