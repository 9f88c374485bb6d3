"""Unit tests for app.core.security: password hashing and token issue/verify."""

import unittest
import uuid
from datetime import timedelta
from types import SimpleNamespace

import jwt

from app.core.errors import InvalidToken
from app.core.security import (
    ACCESS_TOKEN_TYPE,
    REFRESH_TOKEN_TYPE,
    TokenIssueError,
    TokenIssuer,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret"


def _user(**kwargs: object) -> SimpleNamespace:
    defaults = {"id": uuid.uuid4(), "role": "user", "email": "alice@example.com"}
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


class TestPasswordHashing(unittest.TestCase):
    """hash_password produces salted bcrypt digests; verify_password checks them."""

    def test_hash_verifies_and_is_not_plaintext(self) -> None:
        digest = hash_password("pw123456", rounds=4)
        self.assertNotEqual(digest, "pw123456")
        self.assertTrue(digest.startswith("$2"))
        self.assertTrue(verify_password("pw123456", digest))

    def test_wrong_password_does_not_verify(self) -> None:
        digest = hash_password("pw123456", rounds=4)
        self.assertFalse(verify_password("pw1234567", digest))

    def test_same_password_hashes_differently(self) -> None:
        self.assertNotEqual(hash_password("same", rounds=4), hash_password("same", rounds=4))

    def test_default_cost_is_ten_rounds(self) -> None:
        digest = hash_password("pw123456")
        self.assertEqual(digest.split("$")[2], "10")

    def test_hashing_none_fails_loudly(self) -> None:
        with self.assertRaises(TypeError):
            hash_password(None)  # type: ignore[arg-type]

    def test_malformed_digest_verifies_false(self) -> None:
        self.assertFalse(verify_password("pw123456", "not-a-bcrypt-hash"))
        self.assertFalse(verify_password("pw123456", ""))


class TestAccessTokens(unittest.TestCase):
    """issue_access_token signs {sub, role, email}; verify returns the same claims."""

    def setUp(self) -> None:
        self.issuer = TokenIssuer(SECRET)

    def test_round_trip_keeps_id_and_role(self) -> None:
        user = _user(role="admin")
        claims = self.issuer.verify(self.issuer.issue_access_token(user))
        self.assertEqual(claims["sub"], str(user.id))
        self.assertEqual(claims["role"], "admin")
        self.assertEqual(claims["email"], "alice@example.com")
        self.assertEqual(claims["type"], ACCESS_TOKEN_TYPE)

    def test_lifetime_defaults_to_fifteen_minutes(self) -> None:
        claims = self.issuer.verify(self.issuer.issue_access_token(_user()))
        self.assertEqual(claims["exp"] - claims["iat"], 15 * 60)

    def test_expired_token_fails(self) -> None:
        issuer = TokenIssuer(SECRET, access_ttl=timedelta(seconds=-5))
        token = issuer.issue_access_token(_user())
        with self.assertRaises(InvalidToken):
            issuer.verify(token)

    def test_wrong_secret_fails(self) -> None:
        token = TokenIssuer("other-secret").issue_access_token(_user())
        with self.assertRaises(InvalidToken):
            self.issuer.verify(token)

    def test_malformed_token_fails(self) -> None:
        for token in ("", "abc", "a.b.c"):
            with self.subTest(token=token), self.assertRaises(InvalidToken):
                self.issuer.verify(token)

    def test_failures_share_one_message(self) -> None:
        expired = TokenIssuer(SECRET, access_ttl=timedelta(seconds=-5)).issue_access_token(_user())
        forged = TokenIssuer("other-secret").issue_access_token(_user())
        messages = set()
        for token in (expired, forged, "garbage"):
            try:
                self.issuer.verify(token)
            except InvalidToken as e:
                messages.add(e.message)
        self.assertEqual(messages, {"Invalid or expired token"})

    def test_tokens_are_unique_per_issue(self) -> None:
        user = _user()
        self.assertNotEqual(
            self.issuer.issue_access_token(user), self.issuer.issue_access_token(user)
        )

    def test_token_without_type_claim_fails(self) -> None:
        token = jwt.encode({"sub": "x", "role": "user", "exp": 9999999999}, SECRET, algorithm="HS256")
        with self.assertRaises(InvalidToken):
            self.issuer.verify(token)


class TestRefreshTokens(unittest.TestCase):
    def setUp(self) -> None:
        self.issuer = TokenIssuer(SECRET)

    def test_refresh_token_carries_only_id(self) -> None:
        user = _user()
        claims = self.issuer.verify(self.issuer.issue_refresh_token(user), REFRESH_TOKEN_TYPE)
        self.assertEqual(claims["sub"], str(user.id))
        self.assertNotIn("role", claims)
        self.assertEqual(claims["exp"] - claims["iat"], 7 * 24 * 60 * 60)

    def test_refresh_token_is_not_an_access_token(self) -> None:
        token = self.issuer.issue_refresh_token(_user())
        with self.assertRaises(InvalidToken):
            self.issuer.verify(token, ACCESS_TOKEN_TYPE)

    def test_access_token_is_not_a_refresh_token(self) -> None:
        token = self.issuer.issue_access_token(_user())
        with self.assertRaises(InvalidToken):
            self.issuer.verify(token, REFRESH_TOKEN_TYPE)

    def test_separate_refresh_secret(self) -> None:
        issuer = TokenIssuer(SECRET, refresh_secret="refresh-only")
        token = issuer.issue_refresh_token(_user())
        self.assertEqual(issuer.verify(token, REFRESH_TOKEN_TYPE)["type"], REFRESH_TOKEN_TYPE)
        with self.assertRaises(InvalidToken):
            TokenIssuer(SECRET).verify(token, REFRESH_TOKEN_TYPE)


class TestIssueInputChecks(unittest.TestCase):
    """Issuing for an incomplete user is a programming error, not a verification failure."""

    def setUp(self) -> None:
        self.issuer = TokenIssuer(SECRET)

    def test_access_token_requires_id_and_role(self) -> None:
        for user in (_user(id=None), _user(role=None), _user(role=""), None):
            with self.subTest(user=user), self.assertRaises(TokenIssueError):
                self.issuer.issue_access_token(user)

    def test_refresh_token_requires_id(self) -> None:
        with self.assertRaises(TokenIssueError):
            self.issuer.issue_refresh_token(_user(id=None))

    def test_issue_error_is_distinct_from_invalid_token(self) -> None:
        self.assertFalse(issubclass(TokenIssueError, InvalidToken))
        self.assertTrue(issubclass(TokenIssueError, ValueError))

    def test_empty_secret_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TokenIssuer("")


class TestFromSettings(unittest.TestCase):
    def test_lifetimes_and_secret_from_settings(self) -> None:
        from pydantic import SecretStr

        from app.core.config import Settings

        settings = Settings(
            JWT_SECRET=SecretStr("s1"),
            JWT_REFRESH_SECRET=None,
            ACCESS_TOKEN_EXPIRE_MINUTES=5,
            REFRESH_TOKEN_EXPIRE_MINUTES=60,
        )
        issuer = TokenIssuer.from_settings(settings)
        self.assertEqual(issuer.access_ttl, timedelta(minutes=5))
        self.assertEqual(issuer.refresh_ttl, timedelta(minutes=60))
        token = issuer.issue_access_token(_user())
        self.assertEqual(jwt.decode(token, "s1", algorithms=["HS256"])["type"], "access")


if __name__ == "__main__":
    unittest.main()
