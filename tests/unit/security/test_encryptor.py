from __future__ import annotations

import threading

import pytest

from src.md5salted import encrypt, default_factor
from src.md5salted.core.config import HashingConfig
from src.md5salted.exceptions import InvalidArgument
from src.md5salted.security.encoding import HASH_LENGTH, ITOA64
from src.md5salted.security.passwords import PHPMD5SaltedPasswordEncryptor

pytestmark = pytest.mark.unit

# phpass portable hash "$P$9IQRaTwmfeRo7ud9Fh4E2PdI0S3r.L0": '9' selects 2**11 rounds.
_PHPASS_SALT = "IQRaTwmf"
_PHPASS_BODY = "eRo7ud9Fh4E2PdI0S3r.L0"


@pytest.fixture()
def encryptor() -> PHPMD5SaltedPasswordEncryptor:
    return PHPMD5SaltedPasswordEncryptor()


def test_known_vector(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    assert encryptor.encrypt("password123", "12345678", 1) == "oODTVaJ8Fzs6qnWdFw09u0"


@pytest.mark.parametrize(
    ("factor", "expected"),
    [
        (2, "y.YIBVkF4kLTMUwsKRrNX/"),
        (8, "H26e8/Zv9Va.pv5HL8z9Q/"),
    ],
)
def test_known_vectors_for_higher_factors(
    encryptor: PHPMD5SaltedPasswordEncryptor, factor: int, expected: str
) -> None:
    assert encryptor.encrypt("password123", "12345678", factor) == expected


def test_matches_phpass_portable_hash(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    assert encryptor.encrypt("test12345", _PHPASS_SALT, 2048) == _PHPASS_BODY


def test_encrypt_is_deterministic(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    first = encryptor.encrypt("correct-horse-battery", "s@lt", 3)
    second = encryptor.encrypt("correct-horse-battery", "s@lt", 3)

    assert first == second


def test_different_factors_give_different_hashes(
    encryptor: PHPMD5SaltedPasswordEncryptor,
) -> None:
    hashes = {encryptor.encrypt("password123", "12345678", factor) for factor in range(1, 11)}

    assert len(hashes) == 10


def test_output_shape(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    for password in ("", "a", "ünïcødé", "x" * 500):
        encoded = encryptor.encrypt(password, "salt", 1)
        assert len(encoded) == HASH_LENGTH
        assert set(encoded) <= set(ITOA64)


@pytest.mark.parametrize("factor", [0, -1])
def test_invalid_factor(encryptor: PHPMD5SaltedPasswordEncryptor, factor: int) -> None:
    with pytest.raises(InvalidArgument, match=rf"Invalid factor value \[{factor}\]"):
        encryptor.encrypt("password123", "12345678", factor)


def test_default_factor_is_one(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    assert encryptor.default_factor() == 1
    assert default_factor() == 1


def test_default_factor_follows_config() -> None:
    encryptor = PHPMD5SaltedPasswordEncryptor(config=HashingConfig(default_factor=8))

    assert encryptor.default_factor() == 8


def test_verify(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    assert encryptor.verify("password123", "12345678", 1, "oODTVaJ8Fzs6qnWdFw09u0") is True
    assert encryptor.verify("password124", "12345678", 1, "oODTVaJ8Fzs6qnWdFw09u0") is False
    assert encryptor.verify("password123", "12345678", 2, "oODTVaJ8Fzs6qnWdFw09u0") is False
    assert encryptor.verify("password123", "12345678", 1, "") is False


def test_verify_handles_non_ascii_stored_value(
    encryptor: PHPMD5SaltedPasswordEncryptor,
) -> None:
    assert encryptor.verify("password123", "12345678", 1, "ö" * 22) is False


def test_module_level_encrypt_uses_default_encryptor() -> None:
    assert encrypt("password123", "12345678", 1) == "oODTVaJ8Fzs6qnWdFw09u0"


def test_concurrent_calls_agree(encryptor: PHPMD5SaltedPasswordEncryptor) -> None:
    results: list[str] = []
    lock = threading.Lock()

    def _work() -> None:
        value = encryptor.encrypt("password123", "12345678", 16)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=_work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert len(set(results)) == 1


def test_registered_name() -> None:
    assert PHPMD5SaltedPasswordEncryptor.name == "example-salted-php-md5"
