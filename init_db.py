#!/usr/bin/env python3
"""
Initialize database with tables and a demo account
"""
from datetime import timedelta
from decimal import Decimal
import random

from app.core.database import Base, SessionLocal, engine
from app.core.security import get_password_hash
from app.models import Budget, Expense, Goal, User
from app.models.category import ExpenseCategory
from app.models.goal import GoalCategory, GoalPriority
from app.utils.dates import current_date

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo1234"

SAMPLE_TITLES = {
    ExpenseCategory.FOOD: ["Groceries", "Lunch", "Coffee"],
    ExpenseCategory.TRANSPORTATION: ["Bus pass", "Taxi", "Gas"],
    ExpenseCategory.ENTERTAINMENT: ["Movie night", "Concert"],
    ExpenseCategory.BILLS: ["Electricity", "Internet"],
    ExpenseCategory.SHOPPING: ["Clothes", "Household items"],
}


def init_database():
    """Initialize database with tables and demo data"""
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("Tables created successfully!")

    session = SessionLocal()
    try:
        if session.query(User).filter(User.email == DEMO_EMAIL).first():
            print("Demo user already exists!")
            return

        demo_user = User(
            name="Demo User",
            email=DEMO_EMAIL,
            password_hash=get_password_hash(DEMO_PASSWORD),
            is_active=True,
        )
        session.add(demo_user)
        session.commit()
        session.refresh(demo_user)
        print(f"Created demo user: {demo_user.email} (ID: {demo_user.id})")

        # Expenses spread over the last three months
        today = current_date()
        rng = random.Random()
        for _ in range(40):
            category = rng.choice(list(SAMPLE_TITLES))
            session.add(Expense(
                user_id=demo_user.id,
                title=rng.choice(SAMPLE_TITLES[category]),
                amount=Decimal(rng.randint(500, 12000)) / 100,
                category=category,
                date=today - timedelta(days=rng.randint(0, 90)),
            ))

        session.add_all([
            Budget(user_id=demo_user.id, category=ExpenseCategory.FOOD, limit_amount=Decimal("400"), threshold=80),
            Budget(user_id=demo_user.id, category=ExpenseCategory.ENTERTAINMENT, limit_amount=Decimal("100"), threshold=75),
            Goal(
                user_id=demo_user.id,
                title="Emergency fund",
                target_amount=Decimal("3000"),
                current_amount=Decimal("450"),
                deadline=today + timedelta(days=365),
                category=GoalCategory.EMERGENCY,
                priority=GoalPriority.HIGH,
            ),
        ])
        session.commit()
        print("Created sample expenses, budgets and a goal")

    except Exception as e:
        print(f"Error initializing database: {e}")
        session.rollback()
        raise
    finally:
        session.close()


if __name__ == "__main__":
    init_database()
    print("Database initialization complete!")
