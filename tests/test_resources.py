from datetime import datetime, timedelta, timezone

import pytest


def _iso(delta_days):
    return (datetime.now(timezone.utc) + timedelta(days=delta_days)).strftime("%Y-%m-%dT%H:%M:%SZ")


def test_budget_defaults(client, alice):
    budget = client.post("/budgets", json={"category": "Food", "amount": 5000}, headers=alice).json()["data"]

    assert budget["period"] == "monthly"
    assert budget["currency"] == "BDT"
    assert budget["category"] == "Food"


def test_budget_partial_update(client, alice):
    budget = client.post("/budgets", json={"category": "Food", "amount": 5000}, headers=alice).json()["data"]

    client.put(f"/budgets/{budget['id']}", json={"period": "weekly"}, headers=alice)

    updated = client.get(f"/budgets/{budget['id']}", headers=alice).json()["data"]
    assert updated["period"] == "weekly"
    assert updated["amount"] == 5000


def test_liability_overdue_flags(client, alice, wallet):
    overdue = client.post(
        "/liabilities",
        json={"personName": "Karim", "amount": 500, "dueDate": _iso(-3), "accountId": wallet["id"]},
        headers=alice,
    ).json()["data"]
    upcoming = client.post(
        "/liabilities",
        json={"personName": "Rahim", "amount": 800, "dueDate": _iso(10)},
        headers=alice,
    ).json()["data"]

    assert overdue["isOverdue"] is True
    assert overdue["daysUntilDue"] < 0
    assert overdue["isPaid"] is False
    assert overdue["isHistoricalEntry"] is False
    assert upcoming["isOverdue"] is False
    assert upcoming["daysUntilDue"] in (9, 10)

    # soonest due first
    listed = client.get("/liabilities", headers=alice).json()["data"]
    assert [item["id"] for item in listed] == [overdue["id"], upcoming["id"]]


def test_paid_liability_is_never_overdue(client, alice):
    liability = client.post(
        "/liabilities",
        json={"personName": "Karim", "amount": 500, "dueDate": _iso(-3), "isPaid": True},
        headers=alice,
    ).json()["data"]

    assert liability["isOverdue"] is False
    assert liability["daysUntilDue"] == 0


def test_liability_account_must_be_owned(client, bob, wallet):
    response = client.post(
        "/liabilities",
        json={"personName": "Karim", "amount": 500, "dueDate": _iso(5), "accountId": wallet["id"]},
        headers=bob,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Account not found"


def test_loan_lifecycle(client, alice):
    loan = client.post(
        "/loans",
        json={"personName": "Nadia", "amount": 2000, "loanDate": "2024-05-01T00:00:00Z"},
        headers=alice,
    ).json()["data"]
    assert loan["isReturned"] is False
    assert loan["returnDate"] is None

    client.put(f"/loans/{loan['id']}", json={"isReturned": True, "returnDate": "2024-06-01T00:00:00Z"}, headers=alice)
    returned = client.get(f"/loans/{loan['id']}", headers=alice).json()["data"]
    assert returned["isReturned"] is True
    assert returned["returnDate"] == "2024-06-01T00:00:00Z"

    # clearing the return date again
    client.put(f"/loans/{loan['id']}", json={"returnDate": None}, headers=alice)
    assert client.get(f"/loans/{loan['id']}", headers=alice).json()["data"]["returnDate"] is None


def test_loans_newest_first(client, alice):
    first = client.post("/loans", json={"personName": "A", "amount": 1, "loanDate": "2024-01-01T00:00:00Z"}, headers=alice).json()["data"]
    second = client.post("/loans", json={"personName": "B", "amount": 1, "loanDate": "2024-02-01T00:00:00Z"}, headers=alice).json()["data"]

    listed = client.get("/loans", headers=alice).json()["data"]

    assert [loan["id"] for loan in listed] == [second["id"], first["id"]]


def test_savings_goal_defaults_and_progress(client, alice):
    goal = client.post(
        "/savings-goals",
        json={"name": "Laptop", "targetAmount": 80000, "targetDate": _iso(120)},
        headers=alice,
    ).json()["data"]

    assert goal["priority"] == "medium"
    assert goal["currentAmount"] == 0
    assert goal["isCompleted"] is False
    assert goal["progressPercentage"] == 0

    client.put(f"/savings-goals/{goal['id']}", json={"currentAmount": 20000}, headers=alice)
    updated = client.get(f"/savings-goals/{goal['id']}", headers=alice).json()["data"]
    assert updated["progressPercentage"] == 25


def test_savings_goal_rejects_unknown_priority(client, alice):
    response = client.post(
        "/savings-goals",
        json={"name": "Laptop", "targetAmount": 80000, "targetDate": _iso(120), "priority": "urgent"},
        headers=alice,
    )

    assert response.status_code == 400


def test_recurring_transaction_defaults(client, alice, wallet):
    recurring = client.post(
        "/recurring-transactions",
        json={
            "accountId": wallet["id"],
            "transactionType": "income",
            "amount": 60000,
            "startDate": "2024-01-01T00:00:00Z",
            "nextDueDate": "2024-02-01T00:00:00Z",
        },
        headers=alice,
    ).json()["data"]

    assert recurring["isActive"] is True
    assert recurring["frequency"] == "monthly"
    assert recurring["savingsGoalId"] is None
    assert recurring["endDate"] is None


def test_recurring_transaction_goal_must_be_owned(client, alice, bob, wallet):
    goal = client.post(
        "/savings-goals",
        json={"name": "Trip", "targetAmount": 1000, "targetDate": _iso(30)},
        headers=alice,
    ).json()["data"]
    bobs_account = client.post("/accounts", json={"name": "Bob", "type": "cash", "balance": 0}, headers=bob).json()["data"]

    response = client.post(
        "/recurring-transactions",
        json={
            "accountId": bobs_account["id"],
            "transactionType": "expense",
            "amount": 100,
            "startDate": "2024-01-01T00:00:00Z",
            "nextDueDate": "2024-02-01T00:00:00Z",
            "savingsGoalId": goal["id"],
        },
        headers=bob,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Savings goal not found"


@pytest.mark.parametrize("path, payload", [
    ("/budgets", {"category": "Food", "amount": 1}),
    ("/loans", {"personName": "A", "amount": 1, "loanDate": "2024-01-01T00:00:00Z"}),
    ("/savings-goals", {"name": "Goal", "targetAmount": 1, "targetDate": "2025-01-01T00:00:00Z"}),
])
def test_resources_are_isolated_between_users(client, alice, bob, path, payload):
    created = client.post(path, json=payload, headers=alice).json()["data"]

    assert client.get(path, headers=bob).json()["data"] == []
    assert client.get(f"{path}/{created['id']}", headers=bob).status_code == 404
    assert client.put(f"{path}/{created['id']}", json={}, headers=bob).status_code == 404
    assert client.delete(f"{path}/{created['id']}", headers=bob).status_code == 404
    assert client.get(f"{path}/{created['id']}", headers=alice).status_code == 200
