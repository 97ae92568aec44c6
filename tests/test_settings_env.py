"""Startup must fail when required environment is missing."""

import runpy
from pathlib import Path

import pytest
from django.core.exceptions import ImproperlyConfigured

SETTINGS_PATH = Path(__file__).resolve().parent.parent / "config" / "settings.py"


@pytest.mark.parametrize("missing", ["SECRET", "DATABASE_URL"])
def test_missing_required_variable(monkeypatch, missing):
    monkeypatch.setenv("SECRET", "some-secret")
    monkeypatch.setenv("DATABASE_URL", "sqlite://:memory:")
    monkeypatch.delenv(missing)

    with pytest.raises(ImproperlyConfigured, match=missing):
        runpy.run_path(str(SETTINGS_PATH))


def test_database_url_is_parsed(monkeypatch):
    monkeypatch.setenv("SECRET", "some-secret")
    monkeypatch.setenv("DATABASE_URL", "postgres://stock:pw@db.local:5432/stock")

    namespace = runpy.run_path(str(SETTINGS_PATH))

    database = namespace["DATABASES"]["default"]
    assert database["NAME"] == "stock"
    assert database["HOST"] == "db.local"
    assert database["PORT"] == 5432
    assert namespace["SIMPLE_JWT"]["SIGNING_KEY"] == "some-secret"
