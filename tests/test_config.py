import pytest
from pydantic import ValidationError

from app.config import Settings


def test_admin_email_is_normalized():
    s = Settings(_env_file=None, ADMIN_EMAIL="  Admin@Example.COM ")
    assert s.ADMIN_EMAIL == "admin@example.com"


def test_allowed_origins_split_and_trimmed():
    s = Settings(_env_file=None, CLIENT_ORIGIN="http://localhost:5176, https://admin.example.com ,,")
    assert s.allowed_origins == ["http://localhost:5176", "https://admin.example.com"]


def test_gemini_url_uses_model():
    s = Settings(_env_file=None, GEMINI_MODEL="gemini-2.0-flash")
    assert s.gemini_url == "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"


def test_single_accepted_algorithm():
    assert Settings(_env_file=None).JWT_ALGORITHM == "HS256"


def test_settings_are_read_only():
    s = Settings(_env_file=None)
    with pytest.raises(ValidationError):
        s.ADMIN_EMAIL = "someone@example.com"


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "Ops@Example.com")
    monkeypatch.setenv("PORT", "8080")
    s = Settings(_env_file=None)
    assert s.ADMIN_EMAIL == "ops@example.com"
    assert s.PORT == 8080
