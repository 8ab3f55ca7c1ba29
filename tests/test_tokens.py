"""tests/test_tokens.py

Purpose: Tests for bearer token issuance and resolution in TokenService
"""

import pytest
from datetime import timedelta
from jose import jwt

from core.errors import NotAuthorized
from core.tokens import TokenService


@pytest.fixture
def alice(context, db):
    return context.credentials.register(db, "alice", "s3cret")


def corrupt(token: str) -> str:
    header, payload, signature = token.split(".")
    swapped = "A" if payload[5] != "A" else "B"
    return ".".join([header, payload[:5] + swapped + payload[6:], signature])


def test_issued_token_resolves_to_user(context, db, alice):
    token = context.tokens.create_access_token(alice.id)

    assert len(token.split(".")) == 3
    user = context.tokens.resolve_token(db, token)
    assert (user.id, user.username) == (alice.id, "alice")


def test_token_carries_subject_and_expiry(context, alice):
    token = context.tokens.create_access_token(alice.id)

    claims = jwt.get_unverified_claims(token)
    assert claims["sub"] == alice.id
    assert claims["exp"] - claims["iat"] == 60 * 60


@pytest.mark.parametrize("token", ["garbage", "", None, "a.b.c"])
def test_malformed_tokens_are_rejected(context, db, alice, token):
    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, token)


def test_tampered_token_is_rejected(context, db, alice):
    token = context.tokens.create_access_token(alice.id)

    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, corrupt(token))


def test_token_signed_with_other_secret_is_rejected(context, db, alice):
    forger = TokenService(context.credentials, secret_key="not-the-secret")
    token = forger.create_access_token(alice.id)

    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, token)


def test_token_with_other_algorithm_is_rejected(context, db, alice):
    token = jwt.encode({"sub": alice.id}, context.settings.jwt_secret_key, algorithm="HS512")

    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, token)


def test_expired_token_is_rejected(context, db, alice):
    token = context.tokens.create_access_token(alice.id, expires_delta=timedelta(seconds=-30))

    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, token)


@pytest.mark.parametrize("claims", [{}, {"id": "whatever"}, {"sub": ""}])
def test_token_without_subject_is_rejected(context, db, alice, claims):
    token = jwt.encode(claims, context.settings.jwt_secret_key, algorithm="HS256")

    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, token)


def test_deleting_user_revokes_token(context, db, alice):
    token = context.tokens.create_access_token(alice.id)
    assert context.tokens.resolve_token(db, token).id == alice.id

    db.delete(alice)
    db.commit()

    with pytest.raises(NotAuthorized):
        context.tokens.resolve_token(db, token)


def test_all_failures_share_one_error(context, db, alice):
    orphan = context.tokens.create_access_token("00000000-0000-0000-0000-000000000000")
    failures = []
    for token in ["garbage", corrupt(context.tokens.create_access_token(alice.id)), orphan]:
        with pytest.raises(NotAuthorized) as exc_info:
            context.tokens.resolve_token(db, token)
        failures.append((exc_info.value.status_code, exc_info.value.detail))

    assert failures == [(401, "Not Authorized")] * 3
