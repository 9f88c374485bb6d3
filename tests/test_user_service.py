"""Tests for app.services.users and app.services.seed."""

import unittest
import uuid
from unittest.mock import patch

from app.core.errors import DuplicateEmail, NotFound
from app.core.security import verify_password
from app.models import User, Vehicle
from app.services import auth as auth_service
from app.services import users as user_service
from app.services.seed import seed_initial_data
from tests.support import TEST_ROUNDS, DatabaseTestCase


class UserServiceTestCase(DatabaseTestCase):
    def _register(self, email: str, role: str = "user"):
        return auth_service.register(
            self.db, username="someone", email=email, password="pw123456", role=role, rounds=TEST_ROUNDS
        )


class TestUpdateUser(UserServiceTestCase):
    def test_new_password_is_hashed(self) -> None:
        user = self._register("a@x.com")
        updated = user_service.update_user(
            self.db, user.id, {"password": "new-password"}, rounds=TEST_ROUNDS
        )
        self.assertNotEqual(updated.password_hash, "new-password")
        self.assertTrue(verify_password("new-password", updated.password_hash))

    def test_email_taken_by_other_user_is_conflict(self) -> None:
        self._register("a@x.com")
        other = self._register("b@x.com")
        with self.assertRaises(DuplicateEmail):
            user_service.update_user(self.db, other.id, {"email": "A@x.com"})

    def test_email_claimed_after_lookup_is_conflict(self) -> None:
        self._register("a@x.com")
        other = self._register("b@x.com")
        with patch("app.services.users.get_user_by_email", return_value=None):
            with self.assertRaises(DuplicateEmail):
                user_service.update_user(self.db, other.id, {"email": "a@x.com"})
        self.db.expire_all()
        self.assertEqual(self.db.get(User, other.id).email, "b@x.com")

    def test_unknown_fields_and_none_values_are_ignored(self) -> None:
        user = self._register("a@x.com")
        updated = user_service.update_user(
            self.db, user.id, {"username": None, "refresh_token": "x", "role": "admin"}
        )
        self.assertEqual(updated.username, "someone")
        self.assertIsNone(updated.refresh_token)
        self.assertEqual(updated.role, "admin")

    def test_unknown_id_is_not_found(self) -> None:
        with self.assertRaises(NotFound):
            user_service.update_user(self.db, uuid.uuid4(), {"username": "x"})


class TestDeleteUser(UserServiceTestCase):
    def test_delete_removes_user_and_owned_vehicles(self) -> None:
        user = self._register("a@x.com")
        self.db.add(
            Vehicle(make="Ford", model="Focus", year=2019, vin="FORD001", rental_price=30.0, owner_id=user.id)
        )
        self.db.commit()
        user_service.delete_user(self.db, user.id)
        self.assertIsNone(user_service.get_user_by_id(self.db, user.id))
        self.assertEqual(self.db.query(Vehicle).count(), 0)

    def test_unknown_id_is_not_found(self) -> None:
        with self.assertRaises(NotFound):
            user_service.delete_user(self.db, uuid.uuid4())


class TestSeed(DatabaseTestCase):
    def test_seeds_empty_database_once(self) -> None:
        self.assertTrue(seed_initial_data(self.db, rounds=TEST_ROUNDS))
        self.assertEqual(self.db.query(User).count(), 3)
        self.assertEqual(self.db.query(Vehicle).count(), 2)
        self.assertEqual(self.db.query(User).filter(User.role == "admin").count(), 1)

        self.assertFalse(seed_initial_data(self.db, rounds=TEST_ROUNDS))
        self.assertEqual(self.db.query(User).count(), 3)


if __name__ == "__main__":
    unittest.main()
