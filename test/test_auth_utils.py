# test/test_auth_utils.py
from datetime import datetime, timedelta, timezone

import pytest

from auth.utils import create_access_token, decode_access_token, hash_password, verify_password
from errors import AuthenticationError

SECRET = "s3cr3t-de-prueba-para-firmar-tokens"


def test_password_hash_round_trip():
    hashed = hash_password("clave-segura")

    assert hashed != "clave-segura"
    assert verify_password("clave-segura", hashed)
    assert not verify_password("otra", hashed)


def test_verify_against_garbage_hash():
    assert not verify_password("x", "no-es-bcrypt")


def test_token_carries_identity():
    token = create_access_token({"sub": "abc", "email": "a@b.c"}, SECRET, timedelta(days=7))

    claims = decode_access_token(token, SECRET)

    assert claims["sub"] == "abc"
    assert claims["email"] == "a@b.c"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


@pytest.mark.parametrize("age", [timedelta(days=7, seconds=1), timedelta(days=30)])
def test_token_older_than_ttl_is_rejected(age):
    issued = datetime.now(timezone.utc) - age
    token = create_access_token({"sub": "abc"}, SECRET, timedelta(days=7), now=issued)

    with pytest.raises(AuthenticationError):
        decode_access_token(token, SECRET)


def test_wrong_secret_is_rejected():
    token = create_access_token({"sub": "abc"}, SECRET, timedelta(days=7))

    with pytest.raises(AuthenticationError):
        decode_access_token(token, "otro-secreto-distinto-de-32-bytes!")


@pytest.mark.parametrize("token", [None, "", "no.es.jwt"])
def test_missing_or_malformed_token(token):
    with pytest.raises(AuthenticationError):
        decode_access_token(token, SECRET)


def test_token_without_subject_is_rejected():
    token = create_access_token({"email": "a@b.c"}, SECRET, timedelta(days=7))

    with pytest.raises(AuthenticationError):
        decode_access_token(token, SECRET)
