from __future__ import annotations

import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

django.setup()

from apps.notices.registry import get_registry  # noqa: E402


@pytest.fixture
def registry():
    """Default notice registry, emptied around each test."""

    notices = get_registry()
    notices.clear()
    yield notices
    notices.clear()
