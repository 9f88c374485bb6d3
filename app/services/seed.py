"""Seed an empty database with an admin, two users and two vehicles."""

import logging

from sqlalchemy.orm import Session

from app.core.security import BCRYPT_ROUNDS, hash_password
from app.models import User, Vehicle
from app.models.user import ROLE_ADMIN, ROLE_USER

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "password123"

SEED_USERS = (
    ("admin", "admin@fleetrent.com", ROLE_ADMIN),
    ("user1", "user1@fleetrent.com", ROLE_USER),
    ("user2", "user2@fleetrent.com", ROLE_USER),
)


def seed_initial_data(
    db: Session,
    password: str = DEFAULT_PASSWORD,
    rounds: int = BCRYPT_ROUNDS,
) -> bool:
    """
    Insert seed rows only when the users table is empty.

    Returns True if rows were inserted, False if the database already had users.
    """
    if db.query(User).count() > 0:
        logger.info("Database already contains users; seeding skipped.")
        return False

    password_hash = hash_password(password, rounds=rounds)
    users = [
        User(username=username, email=email, password_hash=password_hash, role=role)
        for username, email, role in SEED_USERS
    ]
    db.add_all(users)
    db.flush()

    db.add_all(
        [
            Vehicle(
                make="Tesla",
                model="Model S",
                year=2020,
                vin="TESLA2020VIN001",
                rental_price=120.0,
                owner_id=users[1].id,
            ),
            Vehicle(
                make="Ford",
                model="Mustang",
                year=2018,
                vin="FORD2018VIN001",
                rental_price=85.0,
                owner_id=users[2].id,
            ),
        ]
    )
    db.commit()
    logger.info("Seeded %s users and 2 vehicles.", len(users))
    return True
