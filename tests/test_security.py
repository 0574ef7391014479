from datetime import timedelta

import pytest

from conftest import Store
from inkpost.config.settings import settings
from inkpost.shared.utils.security import SecurityUtils


def test_user_token_carries_identity_claims():
    user = Store().add_user()

    token, expires_in = SecurityUtils.create_user_token(user)
    claims = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)

    assert claims["user_id"] == str(user.id)
    assert claims["email"] == "ada@inkpost.io"
    assert claims["name"] == "Ada Lovelace"
    assert expires_in == settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    assert claims["exp"] - claims["iat"] == expires_in


def test_expired_token_is_rejected():
    token = SecurityUtils.create_access_token(
        {"user_id": "u-1"},
        secret_key="secret",
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(ValueError, match="expired"):
        SecurityUtils.decode_access_token(token, "secret")


def test_token_signed_with_other_key_is_rejected():
    token = SecurityUtils.create_access_token({"user_id": "u-1"}, secret_key="other-secret")

    with pytest.raises(ValueError, match="Invalid token"):
        SecurityUtils.decode_access_token(token, "secret")
