"""Pytest configuration and fixtures."""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def admin_user(django_user_model):
    """Studio admin account."""
    return django_user_model.objects.create_user(username="estudio", password="secret")


@pytest.fixture
def api_client(admin_user) -> APIClient:
    """Authenticated API client."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
