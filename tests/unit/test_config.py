"""Tests for application settings"""
import pytest
from pydantic import ValidationError

from core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("API_TOKEN", raising=False)
    settings = Settings(_env_file=None)

    assert settings.api_token == "mysecrettoken"
    assert settings.port == 8000
    assert settings.debug is False


def test_token_from_environment(monkeypatch):
    monkeypatch.setenv("API_TOKEN", "rotated")

    assert Settings(_env_file=None).api_token == "rotated"


@pytest.mark.parametrize("token", ["", "   "])
def test_blank_token_rejected(token):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, api_token=token)


def test_port_range_validated():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, port=70000)
