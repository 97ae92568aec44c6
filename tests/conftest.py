from pathlib import Path

import pytest
from rest_framework.test import APIClient


def pytest_collection_modifyitems(config, items):
    """Mark tests that exercise the HTTP surface."""
    for item in items:
        if Path(item.fspath).name.endswith("_api.py"):
            item.add_marker(pytest.mark.api)


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def make_user(db):
    from users.models import CustomUser

    def _make_user(email="counter@example.com", password="s3cret-pass", full_name="Casey Counter"):
        return CustomUser.objects.create_user(email=email, password=password, full_name=full_name)

    return _make_user


@pytest.fixture()
def user(make_user):
    return make_user()


@pytest.fixture()
def make_stock(db):
    from inventory.models import Stock

    def _make_stock(item="Widgets", expected_count=0, detected_count=0):
        return Stock.objects.create(
            item=item, expected_count=expected_count, detected_count=detected_count
        )

    return _make_stock
