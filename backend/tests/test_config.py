"""Settings — environment-driven configuration defaults and overrides."""

import pytest
from pydantic import ValidationError

from blogposts.config import Settings


def test_port_defaults_to_8080(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings(_env_file=None).port == 8080


def test_port_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "3000")
    assert Settings(_env_file=None).port == 3000


def test_log_format_normalized_to_lowercase():
    assert Settings(_env_file=None, log_format="TEXT").log_format == "text"


def test_unknown_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
