import sys
import os
import random
from datetime import timedelta
from sqlalchemy.orm import Session
from faker import Faker

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from personal_manager.crud.crud_account import account_repository
from personal_manager.crud.crud_budget import budget_repository
from personal_manager.crud.crud_category import seed_default_categories
from personal_manager.crud.crud_liability import liability_repository
from personal_manager.crud.crud_loan import loan_repository
from personal_manager.crud.crud_recurring_transaction import recurring_transaction_repository
from personal_manager.crud.crud_savings_goal import savings_goal_repository
from personal_manager.crud.crud_transaction import transaction_repository
from personal_manager.crud.crud_user import create_db_user, read_db_user_by_email
from personal_manager.db.core import Base, engine, session_local, utc_now
from personal_manager.models.account import AccountCreate
from personal_manager.models.budget import BudgetCreate
from personal_manager.models.liability import LiabilityCreate
from personal_manager.models.loan import LoanCreate
from personal_manager.models.recurring_transaction import RecurringTransactionCreate
from personal_manager.models.savings_goal import SavingsGoalCreate
from personal_manager.models.transaction import TransactionCreate, INCOME_CATEGORIES, EXPENSE_CATEGORIES
from personal_manager.models.user import UserCreate

fake = Faker()

DEMO_PASSWORD = "demoPassword123"


def seed_user(db: Session, index: int):
    email = f"demo{index}@example.com"
    if read_db_user_by_email(db, email) is not None:
        print(f"{email} already exists, skipping.")
        return

    user = create_db_user(db, UserCreate(name=fake.name(), email=email, password=DEMO_PASSWORD))
    now = utc_now()

    print("Creating accounts...")
    wallet = account_repository.create(db, user.id, AccountCreate(name="Wallet", type="cash", balance=round(random.uniform(100, 2000), 2)))
    bank = account_repository.create(db, user.id, AccountCreate(name=f"{fake.company()} Bank", type="bank", balance=round(random.uniform(5000, 80000), 2)))
    account_repository.create(db, user.id, AccountCreate(name="bKash", type="mobile_banking", balance=round(random.uniform(0, 5000), 2)))
    account_repository.create(db, user.id, AccountCreate(name="Rewards Card", type="credit_card", balance=-round(random.uniform(0, 20000), 2), credit_limit=50000))

    print("Creating transactions...")
    for _ in range(40):
        income = random.random() < 0.2
        transaction_repository.create(db, user.id, TransactionCreate(
            account_id=random.choice([wallet.id, bank.id]),
            type="income" if income else "expense",
            amount=round(random.uniform(500, 30000) if income else random.uniform(20, 3000), 2),
            category=random.choice(INCOME_CATEGORIES if income else EXPENSE_CATEGORIES),
            description=fake.catch_phrase(),
            date=now - timedelta(days=random.randint(0, 180)),
        ))

    print("Creating budgets...")
    for category in random.sample(EXPENSE_CATEGORIES, 3):
        budget_repository.create(db, user.id, BudgetCreate(category=category, amount=round(random.uniform(1000, 10000), -2)))

    print("Creating loans and liabilities...")
    for _ in range(2):
        loan_repository.create(db, user.id, LoanCreate(
            person_name=fake.name(),
            amount=round(random.uniform(500, 10000), -1),
            loan_date=now - timedelta(days=random.randint(10, 90)),
            account_id=bank.id,
            description="Lent for " + fake.word(),
        ))
        liability_repository.create(db, user.id, LiabilityCreate(
            person_name=fake.name(),
            amount=round(random.uniform(500, 10000), -1),
            due_date=now + timedelta(days=random.randint(-10, 60)),
            account_id=wallet.id,
        ))

    print("Creating savings goal and recurring transactions...")
    goal = savings_goal_repository.create(db, user.id, SavingsGoalCreate(
        name="Emergency Fund",
        target_amount=100000,
        target_date=now + timedelta(days=365),
        account_id=bank.id,
        priority="high",
    ))
    recurring_transaction_repository.create(db, user.id, RecurringTransactionCreate(
        account_id=bank.id,
        transaction_type="expense",
        amount=5000,
        category="Savings",
        start_date=now,
        next_due_date=now + timedelta(days=30),
        savings_goal_id=goal.id,
    ))
    recurring_transaction_repository.create(db, user.id, RecurringTransactionCreate(
        account_id=bank.id,
        transaction_type="income",
        amount=60000,
        category="Salary",
        start_date=now,
        next_due_date=now + timedelta(days=30),
    ))

    print(f"User {email} seeded (password: {DEMO_PASSWORD}).")


def seed_database(user_count: int = 3):
    """
    Fills the database with demo users and a few months of activity each.
    """
    Base.metadata.create_all(bind=engine)
    db: Session = session_local()

    try:
        print(f"{seed_default_categories(db)} default categories created.")
        for i in range(user_count):
            print(f"--- Seeding User {i+1}/{user_count} ---")
            seed_user(db, i + 1)
        print("Successfully seeded database.")
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
