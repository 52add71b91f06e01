from __future__ import annotations

import pytest

from taskhub.application.services.password_hashing import WerkzeugPasswordHasher

FAST_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_METHOD)


def test_hash_verifies_and_differs_from_plaintext(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("Secret123!")

    assert hashed != "Secret123!"
    assert hashed.startswith("pbkdf2:sha256:1000$")
    assert hasher.verify("Secret123!", hashed)
    assert not hasher.verify("Secret123", hashed)


def test_same_password_gets_distinct_salts(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.hash("Secret123!") != hasher.hash("Secret123!")


@pytest.mark.parametrize("stored", ["", "not-a-hash", "unknown:method$salt$abc"])
def test_unusable_stored_hash_never_verifies(hasher: WerkzeugPasswordHasher, stored: str) -> None:
    assert hasher.verify("Secret123!", stored) is False


def test_default_method_is_scrypt() -> None:
    hashed = WerkzeugPasswordHasher().hash("Secret123!")

    assert hashed.startswith("scrypt:")
