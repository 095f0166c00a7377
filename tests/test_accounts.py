from datetime import datetime

from sqlalchemy import update

from personal_manager.db.core import AccountDB


def test_create_account_applies_defaults(client, alice):
    response = client.post("/accounts", json={"name": "Wallet", "type": "cash", "balance": 100}, headers=alice)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    account = body["data"]
    assert account["name"] == "Wallet"
    assert account["type"] == "cash"
    assert account["balance"] == 100
    assert account["currency"] == "BDT"
    assert account["creditLimit"] is None
    assert account["id"]
    assert account["createdAt"] == account["updatedAt"]


def test_body_user_id_is_ignored(client, alice):
    alice_id = client.get("/auth/me", headers=alice).json()["id"]

    response = client.post(
        "/accounts",
        json={"name": "Sneaky", "type": "cash", "balance": 1, "userId": "someone-else", "user_id": "someone-else"},
        headers=alice,
    )

    assert response.json()["data"]["userId"] == alice_id


def test_partial_update_merges(client, alice, wallet):
    response = client.put(f"/accounts/{wallet['id']}", json={"balance": 50}, headers=alice)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Account updated successfully"}

    account = client.get(f"/accounts/{wallet['id']}", headers=alice).json()["data"]
    assert account["balance"] == 50
    assert account["name"] == "Wallet"
    assert account["type"] == "cash"


def test_empty_update_still_touches_updated_at(client, db_session, alice, wallet):
    db_session.execute(update(AccountDB).where(AccountDB.id == wallet["id"]).values(updated_at=datetime(2020, 1, 1)))
    db_session.commit()

    response = client.put(f"/accounts/{wallet['id']}", json={}, headers=alice)

    assert response.status_code == 200
    account = client.get(f"/accounts/{wallet['id']}", headers=alice).json()["data"]
    assert account["updatedAt"] != "2020-01-01T00:00:00Z"
    assert account["balance"] == 100


def test_null_clears_optional_and_keeps_required(client, alice):
    card = client.post(
        "/accounts",
        json={"name": "Card", "type": "credit_card", "balance": -200, "creditLimit": 1000},
        headers=alice,
    ).json()["data"]

    client.put(f"/accounts/{card['id']}", json={"creditLimit": None, "name": None}, headers=alice)

    account = client.get(f"/accounts/{card['id']}", headers=alice).json()["data"]
    assert account["creditLimit"] is None
    assert account["name"] == "Card"


def test_other_users_account_is_not_found(client, alice, bob, wallet):
    not_found = {"success": False, "message": "Account not found"}

    assert client.get(f"/accounts/{wallet['id']}", headers=bob).json() == not_found
    assert client.put(f"/accounts/{wallet['id']}", json={"balance": 0}, headers=bob).status_code == 404
    assert client.delete(f"/accounts/{wallet['id']}", headers=bob).status_code == 404

    # untouched for the owner
    account = client.get(f"/accounts/{wallet['id']}", headers=alice).json()["data"]
    assert account["balance"] == 100


def test_list_is_scoped_and_newest_first(client, db_session, alice, bob, wallet):
    bank = client.post("/accounts", json={"name": "Bank", "type": "bank", "balance": 5000}, headers=alice).json()["data"]
    client.post("/accounts", json={"name": "Bob's", "type": "cash", "balance": 1}, headers=bob)
    db_session.execute(update(AccountDB).where(AccountDB.id == wallet["id"]).values(created_at=datetime(2020, 1, 1)))
    db_session.commit()

    accounts = client.get("/accounts", headers=alice).json()["data"]

    assert [a["id"] for a in accounts] == [bank["id"], wallet["id"]]


def test_delete_account(client, alice, wallet):
    response = client.delete(f"/accounts/{wallet['id']}", headers=alice)

    assert response.json() == {"success": True, "message": "Account deleted successfully"}
    assert client.get(f"/accounts/{wallet['id']}", headers=alice).status_code == 404
    assert client.get("/accounts", headers=alice).json() == {"success": True, "data": []}


def test_duplicate_client_id_conflicts(client, alice, bob):
    payload = {"id": "acc-1", "name": "Wallet", "type": "cash", "balance": 10}
    assert client.post("/accounts", json=payload, headers=alice).status_code == 200

    # ids are global, even across users
    response = client.post("/accounts", json=payload, headers=bob)

    assert response.status_code == 409
    assert response.json()["success"] is False


def test_invalid_payload_is_bad_request(client, alice):
    response = client.post("/accounts", json={"name": "Wallet"}, headers=alice)

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_camel_case_account_type_alias(client, alice):
    response = client.post("/accounts", json={"name": "bKash", "type": "mobileBanking", "balance": 0}, headers=alice)

    assert response.json()["data"]["type"] == "mobile_banking"


def test_credit_card_display_fields(client, alice):
    card = client.post(
        "/accounts",
        json={"name": "Card", "type": "credit_card", "balance": -300, "creditLimit": 1000},
        headers=alice,
    ).json()["data"]

    assert card["isCreditCard"] is True
    assert card["usedAmount"] == 300
    assert card["availableCredit"] == 700
    assert card["displayBalance"] == 700


def test_account_stats(client, alice, bob, wallet):
    client.post("/accounts", json={"name": "Card", "type": "credit_card", "balance": -300, "creditLimit": 1000}, headers=alice)
    client.post("/accounts", json={"name": "Bob's", "type": "bank", "balance": 9999}, headers=bob)

    stats = client.get("/accounts/stats", headers=alice).json()["data"]

    assert stats["totalAccounts"] == 2
    assert stats["accountsByType"] == {"cash": 1, "credit_card": 1}
    assert stats["totalAssets"] == 100
    assert stats["totalLiabilities"] == 300
    assert stats["netWorth"] == -200
