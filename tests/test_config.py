"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from app.core.config import Settings


class TestSettingsDefaults(unittest.TestCase):
    def test_token_lifetimes(self) -> None:
        settings = Settings(DATABASE_URL="sqlite://")
        self.assertEqual(settings.ACCESS_TOKEN_EXPIRE_MINUTES, 15)
        self.assertEqual(settings.REFRESH_TOKEN_EXPIRE_MINUTES, 7 * 24 * 60)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")

    def test_admin_registration_switch(self) -> None:
        self.assertTrue(Settings(DATABASE_URL="sqlite://").ALLOW_ADMIN_REGISTRATION)
        self.assertFalse(
            Settings(DATABASE_URL="sqlite://", ALLOW_ADMIN_REGISTRATION="false").ALLOW_ADMIN_REGISTRATION
        )


class TestSettingsValidation(unittest.TestCase):
    def test_rejects_unknown_database_scheme(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="mysql://root@localhost/db")

    def test_accepts_postgres_and_sqlite(self) -> None:
        for url in ("postgresql://u:p@h:5432/d", "postgresql+psycopg2://u@h/d", "sqlite:///local.db"):
            with self.subTest(url=url):
                self.assertEqual(Settings(DATABASE_URL=url).DATABASE_URL, url)

    def test_rejects_blank_jwt_secret(self) -> None:
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="sqlite://", JWT_SECRET=SecretStr("  "))

    def test_blank_refresh_secret_means_unset(self) -> None:
        settings = Settings(DATABASE_URL="sqlite://", JWT_REFRESH_SECRET=SecretStr(" "))
        self.assertIsNone(settings.JWT_REFRESH_SECRET)

    def test_rejects_out_of_range_lifetimes(self) -> None:
        for field, value in (
            ("ACCESS_TOKEN_EXPIRE_MINUTES", 0),
            ("ACCESS_TOKEN_EXPIRE_MINUTES", 1441),
            ("REFRESH_TOKEN_EXPIRE_MINUTES", 0),
            ("BCRYPT_ROUNDS", 3),
            ("PORT", 70000),
        ):
            with self.subTest(field=field, value=value), self.assertRaises(PydanticValidationError):
                Settings(DATABASE_URL="sqlite://", **{field: value})

    def test_api_prefix_normalized(self) -> None:
        self.assertEqual(Settings(DATABASE_URL="sqlite://", API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(PydanticValidationError):
            Settings(DATABASE_URL="sqlite://", API_PREFIX="api")


if __name__ == "__main__":
    unittest.main()
