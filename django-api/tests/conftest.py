"""Pytest configuration and shared fixtures."""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from planner.services.planner_service import PlannerService, build_planner_service


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def reset_planner():
    """Give each test an empty process-wide planner."""
    apps.get_app_config("planner").reset_service()
    yield


@pytest.fixture
def service() -> PlannerService:
    return build_planner_service()


@pytest.fixture
def app_service() -> PlannerService:
    """The service instance the HTTP handlers use."""
    return apps.get_app_config("planner").service
