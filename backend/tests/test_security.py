"""Tests for token handling and error-to-status mapping."""

from datetime import timedelta

import jwt
import pytest
from sqlalchemy.exc import OperationalError

from hotels_api.api.errors import status_code_for
from hotels_api.core.config import get_settings
from hotels_api.core.security import create_access_token, decode_access_token
from hotels_api.domain.errors import InvalidData, NotFound, Unauthorized


def test_token_round_trip():
    assert decode_access_token(create_access_token(7)) == 7


def test_expired_token_is_unauthorized():
    token = create_access_token(7, expires_delta=timedelta(seconds=-1))
    with pytest.raises(Unauthorized):
        decode_access_token(token)


def test_token_signed_with_other_key_is_unauthorized():
    settings = get_settings()
    token = jwt.encode({"userId": 7}, "another-secret-key-that-is-long-enough", algorithm=settings.ALGORITHM)
    with pytest.raises(Unauthorized):
        decode_access_token(token)


@pytest.mark.parametrize("claims", [{}, {"userId": "7"}, {"userId": True}, {"sub": "7"}])
def test_token_without_integer_user_id_is_unauthorized(claims):
    settings = get_settings()
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    with pytest.raises(Unauthorized):
        decode_access_token(token)


def test_malformed_token_is_unauthorized():
    with pytest.raises(Unauthorized):
        decode_access_token("not.a.jwt")


@pytest.mark.parametrize("error,expected", [
    (Unauthorized(), 401),
    (NotFound(), 404),
    (InvalidData(["Ticket must be paid"]), 402),
    (OperationalError("SELECT 1", {}, Exception("connection refused")), 404),
    (ValueError("boom"), 404),
])
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected
