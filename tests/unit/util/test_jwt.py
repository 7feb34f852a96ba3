"""Unit tests for JWT helpers and JWTService."""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from lens.config import AuthSettings
from lens.domain.service import JWTService
from lens.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


def test_round_trip_payload():
    token = create_token(7, "dana", "dana@example.com", SETTINGS)

    payload = verify_token(token, SETTINGS)

    assert (payload.id, payload.username, payload.email) == (7, "dana", "dana@example.com")


def test_wrong_secret_rejected():
    token = create_token(7, "dana", None, AuthSettings(jwt_secret="other-secret"))

    with pytest.raises(JWTError, match="Invalid token"):
        verify_token(token, SETTINGS)


def test_expired_token_rejected():
    token = pyjwt.encode(
        {
            "id": 7,
            "username": "dana",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError, match="expired"):
        verify_token(token, SETTINGS)


def test_payload_without_id_rejected():
    token = pyjwt.encode(
        {"username": "dana", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        SETTINGS.jwt_secret,
        algorithm=SETTINGS.jwt_algorithm,
    )

    with pytest.raises(JWTError):
        verify_token(token, SETTINGS)


def test_service_uses_its_settings():
    service = JWTService(SETTINGS)

    token = service.create_token(3, "carol")

    assert service.verify_token(token).id == 3
    with pytest.raises(JWTError):
        service.verify_token("not-a-token")
