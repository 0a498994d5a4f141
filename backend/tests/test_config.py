import pytest

from config import Settings


@pytest.mark.parametrize("raw,expected", [
    ("https://a.example, https://b.example", ["https://a.example", "https://b.example"]),
    ('["https://a.example", "https://b.example"]', ["https://a.example", "https://b.example"]),
    ("https://a.example,,", ["https://a.example"]),
])
def test_cors_origins_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings(_env_file=None).cors_origins == expected


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings(_env_file=None).cors_origins == ["http://localhost:5173"]


def test_cors_origins_passed_as_list():
    settings = Settings(_env_file=None, cors_origins=["https://c.example"])
    assert settings.cors_origins == ["https://c.example"]
