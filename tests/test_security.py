import importlib
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core import config
from app.core.config import SECRET_KEY, ALGORITHM
from app.core.exceptions import ExpiredTokenError, InvalidTokenError
from app.core.security import hash_password, verify_password, issue_token, verify_token


def test_hash_is_salted_and_verifies():
    first = hash_password("pw1")
    second = hash_password("pw1")

    assert first != second
    assert verify_password("pw1", first)
    assert not verify_password("pw2", first)


def test_issued_token_round_trips_to_principal():
    token = issue_token(7, "ana@x.com", ["ROLE_USER"])
    principal = verify_token(token)

    assert principal.user_id == 7
    assert principal.email == "ana@x.com"
    assert principal.roles == ("ROLE_USER",)
    assert principal.has_any_role("ROLE_USER", "ROLE_ADMIN")
    assert not principal.has_any_role("ROLE_ADMIN")


def test_expired_token_is_rejected_as_expired():
    past = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt.encode(
        {"sub": "7", "email": "ana@x.com", "roles": ["ROLE_USER"], "exp": past},
        SECRET_KEY,
        algorithm=ALGORITHM,
    )

    with pytest.raises(ExpiredTokenError):
        verify_token(token)


def test_token_signed_with_other_secret_is_invalid():
    token = jwt.encode(
        {"sub": "7", "email": "ana@x.com", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret",
        algorithm=ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        verify_token(token)


def test_garbage_token_is_invalid():
    with pytest.raises(InvalidTokenError):
        verify_token("not.a.token")


def test_token_without_email_claim_is_invalid():
    token = jwt.encode(
        {"sub": "7", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        SECRET_KEY,
        algorithm=ALGORITHM,
    )

    with pytest.raises(InvalidTokenError):
        verify_token(token)


def test_missing_secret_key_warns_and_falls_back(monkeypatch, caplog):

    monkeypatch.delenv("SECRET_KEY")
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: None)
    try:
        with caplog.at_level("WARNING", logger="app.core.config"):
            importlib.reload(config)
        assert config.SECRET_KEY == "change-me"
        assert "SECRET_KEY is not set" in caplog.text
    finally:
        monkeypatch.undo()
        importlib.reload(config)
