from uuid import uuid4

import pytest

from personal_manager.crud.crud_account import account_repository
from personal_manager.crud.crud_transaction import transaction_repository
from personal_manager.db.core import NotFoundError, ConflictError, UserDB, utc_now
from personal_manager.models.account import AccountCreate, AccountUpdate
from personal_manager.models.transaction import TransactionCreate, TransactionUpdate


@pytest.fixture
def user_ids(db_session):
    ids = []
    for name in ("owner", "stranger"):
        now = utc_now()
        user = UserDB(id=str(uuid4()), name=name, email=f"{name}@example.com", password_hash="x", created_at=now, updated_at=now)
        db_session.add(user)
        ids.append(user.id)
    db_session.commit()
    return ids


def test_create_generates_id_and_owner(db_session, user_ids):
    owner, _ = user_ids

    account = account_repository.create(db_session, owner, AccountCreate(name="Wallet", type="cash", balance=100))

    assert account.id
    assert account.user_id == owner
    assert account.account_type == "cash"
    assert account.currency == "BDT"


def test_get_is_scoped(db_session, user_ids):
    owner, stranger = user_ids
    account = account_repository.create(db_session, owner, AccountCreate(name="Wallet", type="cash", balance=100))

    with pytest.raises(NotFoundError, match="Account not found"):
        account_repository.get(db_session, stranger, account.id)


def test_duplicate_id_raises_conflict(db_session, user_ids):
    owner, stranger = user_ids
    account_repository.create(db_session, owner, AccountCreate(id="fixed", name="Wallet", type="cash", balance=1))

    with pytest.raises(ConflictError):
        account_repository.create(db_session, stranger, AccountCreate(id="fixed", name="Other", type="cash", balance=1))


def test_missing_owner_is_not_reported_as_duplicate(db_session, user_ids):
    owner, _ = user_ids

    with pytest.raises(ValueError, match="Account refers to a record that does not exist"):
        account_repository.create(db_session, "deleted-user", AccountCreate(id="orphan", name="Wallet", type="cash", balance=1))

    # rolled back, so the id is still free and the session still usable
    account = account_repository.create(db_session, owner, AccountCreate(id="orphan", name="Wallet", type="cash", balance=1))
    assert account.user_id == owner


def test_update_only_touches_sent_fields(db_session, user_ids):
    owner, _ = user_ids
    account = account_repository.create(
        db_session, owner, AccountCreate(name="Card", type="credit_card", balance=-10, credit_limit=500)
    )

    updated = account_repository.update(
        db_session, owner, account.id, AccountUpdate.model_validate({"balance": -20, "name": None, "creditLimit": None})
    )

    assert updated.balance == -20
    assert updated.name == "Card"
    assert updated.credit_limit is None
    assert updated.account_type == "credit_card"


def test_reference_checks_ownership(db_session, user_ids):
    owner, stranger = user_ids
    account = account_repository.create(db_session, owner, AccountCreate(name="Wallet", type="cash", balance=1))

    with pytest.raises(ValueError, match="Account not found"):
        transaction_repository.create(
            db_session, stranger, TransactionCreate(account_id=account.id, type="expense", amount=5)
        )
    assert transaction_repository.list(db_session, stranger) == []


def test_transaction_date_defaults_to_now(db_session, user_ids):
    owner, _ = user_ids
    account = account_repository.create(db_session, owner, AccountCreate(name="Wallet", type="cash", balance=1))
    before = utc_now()

    tx = transaction_repository.create(db_session, owner, TransactionCreate(account_id=account.id, type="income", amount=5))

    assert tx.date >= before


def test_update_rejects_reference_to_missing_account(db_session, user_ids):
    owner, _ = user_ids
    account = account_repository.create(db_session, owner, AccountCreate(name="Wallet", type="cash", balance=1))
    tx = transaction_repository.create(db_session, owner, TransactionCreate(account_id=account.id, type="income", amount=5))

    with pytest.raises(ValueError):
        transaction_repository.update(db_session, owner, tx.id, TransactionUpdate(account_id="missing"))


def test_delete_missing_raises(db_session, user_ids):
    owner, _ = user_ids

    with pytest.raises(NotFoundError):
        account_repository.delete(db_session, owner, "missing")
