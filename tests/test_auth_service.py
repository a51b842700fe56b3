import pytest

from auth.schemas import LoginRequest, RegisterRequest
from auth.service import (
    MAX_PASSWORD_LENGTH,
    is_valid_email,
    normalize_email,
    validate_login,
    validate_registration,
)
from core.errors import ValidationError
from core.security import hash_password, verify_password


@pytest.mark.parametrize(
    "email",
    ["jane@example.com", "jane.doe+esports@mail.example.co.uk", "j_d-1@sub-domain.io"],
)
def test_well_formed_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    ["not-an-email", "jane@", "@example.com", "jane@example", "jane doe@example.com", "jane@@example.com"],
)
def test_malformed_emails(email):
    assert not is_valid_email(email)


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  Jane@Example.COM\t") == "jane@example.com"


def test_validate_registration_trims_name_and_email_but_not_password():
    body = RegisterRequest(
        name="  Jane Doe ",
        email=" jane@example.com ",
        password=" secret123",
        confirmPassword=" secret123",
    )

    assert validate_registration(body) == ("Jane Doe", "jane@example.com", " secret123")


def test_validate_registration_accepts_exactly_eight_characters():
    body = RegisterRequest(name="Jane", email="jane@example.com", password="12345678", confirmPassword="12345678")

    assert validate_registration(body)[2] == "12345678"


def test_validate_registration_checks_length_before_match():
    body = RegisterRequest(name="Jane", email="jane@example.com", password="short1", confirmPassword="other")

    with pytest.raises(ValidationError) as excinfo:
        validate_registration(body)
    assert excinfo.value.message == "Password must be at least 8 characters long"
    assert excinfo.value.status_code == 400


def test_validate_registration_password_match_is_exact():
    body = RegisterRequest(name="Jane", email="jane@example.com", password="secret123", confirmPassword="Secret123")

    with pytest.raises(ValidationError, match="Passwords do not match"):
        validate_registration(body)


def test_validate_login_normalizes_email():
    assert validate_login(LoginRequest(email=" JANE@example.com", password="pw")) == ("jane@example.com", "pw")


def test_validate_login_rejects_empty_password():
    with pytest.raises(ValidationError, match="Email and password are required"):
        validate_login(LoginRequest(email="jane@example.com", password=""))


def test_validate_registration_caps_password_length():
    long_password = "x" * (MAX_PASSWORD_LENGTH + 1)
    body = RegisterRequest(name="Jane", email="jane@example.com", password=long_password, confirmPassword=long_password)

    with pytest.raises(ValidationError, match="Password must be at most 4096 characters long"):
        validate_registration(body)


def test_verify_password_rejects_oversized_secret():
    assert verify_password("x" * (MAX_PASSWORD_LENGTH + 1), hash_password("secret123")) is False
