import pytest

from src.app.services.password_hasher import Argon2PasswordHasher


def test_default_parameters_are_argon2id_64mib_two_passes():
    hasher = Argon2PasswordHasher()

    stored = hasher.hash("correct horse")

    assert stored.startswith("$argon2id$v=19$m=65536,t=2,p=1$")
    assert hasher.verify(stored, "correct horse") is True


def test_verify_rejects_wrong_password(fast_hasher):
    stored = fast_hasher.hash("correct horse")

    assert fast_hasher.verify(stored, "battery staple") is False


@pytest.mark.parametrize("stored", ["", "not-a-hash", "$argon2id$garbage"])
def test_verify_returns_false_for_malformed_hash(fast_hasher, stored):
    assert fast_hasher.verify(stored, "anything") is False


def test_verify_returns_false_for_empty_candidate(fast_hasher):
    stored = fast_hasher.hash("correct horse")

    assert fast_hasher.verify(stored, "") is False


def test_hash_rejects_empty_password(fast_hasher):
    with pytest.raises(ValueError):
        fast_hasher.hash("")


def test_same_password_hashes_differently(fast_hasher):
    assert fast_hasher.hash("same") != fast_hasher.hash("same")


def test_verify_dummy_always_fails(fast_hasher):
    assert fast_hasher.verify_dummy("dummy-password-for-timing") is False
    assert fast_hasher.verify_dummy("") is False


def test_weaker_hash_needs_rehash(fast_hasher):
    weak = fast_hasher.hash("pw")

    assert Argon2PasswordHasher().needs_rehash(weak) is True
    assert fast_hasher.needs_rehash(weak) is False
