from hotel_reviews_api.app.core.config import Settings
from hotel_reviews_api.app.core.security import create_access_token, decode_access_token


SETTINGS = Settings(secret_key="s3cret", access_token_expire_minutes=5)


def test_token_round_trip():
    token = create_access_token({"sub": "U1"}, app_settings=SETTINGS)

    payload = decode_access_token(token, SETTINGS.secret_key)

    assert payload["sub"] == "U1"
    assert "exp" in payload


def test_token_signed_with_other_key_is_rejected():
    token = create_access_token({"sub": "U1"}, app_settings=SETTINGS)
    assert decode_access_token(token, "other-key") is None


def test_tampered_token_is_rejected():
    header, _, signature = create_access_token({"sub": "U1"}, app_settings=SETTINGS).split(".")
    forged_payload = create_access_token({"sub": "admin"}, app_settings=SETTINGS).split(".")[1]

    assert decode_access_token(f"{header}.{forged_payload}.{signature}", SETTINGS.secret_key) is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "U1"}, expires_delta=-10, app_settings=SETTINGS)
    assert decode_access_token(token, SETTINGS.secret_key) is None


def test_malformed_tokens_are_rejected():
    for token in ("", "abc", "a.b", "a.b.c", "!!.??.**"):
        assert decode_access_token(token, SETTINGS.secret_key) is None
