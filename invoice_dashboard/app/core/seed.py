"""
Placeholder data for a fresh dashboard.

``seed_database`` inserts a demo user, a handful of customers and
their invoices.  Rows are keyed by fixed identifiers and inserted with
``INSERT OR IGNORE``, so seeding an already seeded database is a
no‑op.
"""

import logging
from typing import Optional

from .db import get_cursor
from .security import hash_password


logger = logging.getLogger(__name__)

USERS = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

CUSTOMERS = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
    {
        "id": "cc27c14a-0acf-4f4a-a6c9-d45682c144b9",
        "name": "Amy Burns",
        "email": "amy@burns.com",
        "image_url": "/customers/amy-burns.png",
    },
    {
        "id": "13d07535-c59e-4157-a011-f8d2ef4e0cbb",
        "name": "Balazs Orban",
        "email": "balazs@orban.com",
        "image_url": "/customers/balazs-orban.png",
    },
]

# Amounts are in cents.
INVOICES = [
    {"id": "inv-0001", "customer_id": CUSTOMERS[0]["id"], "amount": 15795, "status": "pending", "date": "2022-12-06"},
    {"id": "inv-0002", "customer_id": CUSTOMERS[1]["id"], "amount": 20348, "status": "pending", "date": "2022-11-14"},
    {"id": "inv-0003", "customer_id": CUSTOMERS[4]["id"], "amount": 3040, "status": "paid", "date": "2022-10-29"},
    {"id": "inv-0004", "customer_id": CUSTOMERS[3]["id"], "amount": 44800, "status": "paid", "date": "2023-09-10"},
    {"id": "inv-0005", "customer_id": CUSTOMERS[5]["id"], "amount": 34577, "status": "pending", "date": "2023-08-05"},
    {"id": "inv-0006", "customer_id": CUSTOMERS[2]["id"], "amount": 54246, "status": "pending", "date": "2023-07-16"},
    {"id": "inv-0007", "customer_id": CUSTOMERS[0]["id"], "amount": 666, "status": "pending", "date": "2023-06-27"},
    {"id": "inv-0008", "customer_id": CUSTOMERS[3]["id"], "amount": 32545, "status": "paid", "date": "2023-06-09"},
    {"id": "inv-0009", "customer_id": CUSTOMERS[4]["id"], "amount": 1250, "status": "paid", "date": "2023-06-17"},
    {"id": "inv-0010", "customer_id": CUSTOMERS[5]["id"], "amount": 8546, "status": "paid", "date": "2023-06-07"},
    {"id": "inv-0011", "customer_id": CUSTOMERS[1]["id"], "amount": 500, "status": "paid", "date": "2023-08-19"},
    {"id": "inv-0012", "customer_id": CUSTOMERS[5]["id"], "amount": 8945, "status": "paid", "date": "2023-06-03"},
    {"id": "inv-0013", "customer_id": CUSTOMERS[2]["id"], "amount": 1000, "status": "paid", "date": "2022-06-05"},
]


def add_user(name: str, email: str, password: str, user_id: Optional[str] = None) -> None:
    """Insert a user unless one with the same email already exists."""
    with get_cursor() as cursor:
        if user_id is None:
            cursor.execute(
                "INSERT OR IGNORE INTO users (name, email, password) VALUES (?, ?, ?)",
                (name, email, hash_password(password)),
            )
        else:
            cursor.execute(
                "INSERT OR IGNORE INTO users (id, name, email, password) VALUES (?, ?, ?, ?)",
                (user_id, name, email, hash_password(password)),
            )


def seed_database() -> None:
    """Insert the placeholder users, customers and invoices."""
    for user in USERS:
        add_user(user["name"], user["email"], user["password"], user_id=user["id"])
    with get_cursor() as cursor:
        cursor.executemany(
            "INSERT OR IGNORE INTO customers (id, name, email, image_url) VALUES (?, ?, ?, ?)",
            [(c["id"], c["name"], c["email"], c["image_url"]) for c in CUSTOMERS],
        )
        cursor.executemany(
            "INSERT OR IGNORE INTO invoices (id, customer_id, amount, status, date) VALUES (?, ?, ?, ?, ?)",
            [(i["id"], i["customer_id"], i["amount"], i["status"], i["date"]) for i in INVOICES],
        )
    logger.info(
        "Seeded %d users, %d customers and %d invoices",
        len(USERS),
        len(CUSTOMERS),
        len(INVOICES),
    )
