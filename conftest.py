"""Pytest configuration and shared fixtures for all tests."""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username='admin',
        email='admin@example.com',
        password='admin-pass-123',
        is_staff=True
    )


@pytest.fixture
def make_user(django_user_model):
    """Factory for platform users with a given bonus ledger."""
    counter = {'n': 0}

    def _make_user(bonus_balance='0', total_bonus_received='0', **extra):
        counter['n'] += 1
        n = counter['n']
        return django_user_model.objects.create_user(
            username=extra.pop('username', f'trader{n}'),
            email=extra.pop('email', f'trader{n}@example.com'),
            password='trader-pass-123',
            bonus_balance=Decimal(bonus_balance),
            total_bonus_received=Decimal(total_bonus_received),
            **extra
        )

    return _make_user


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def bonus_settings(db):
    from bonuses.models import BonusSettings
    return BonusSettings.objects.get_or_create_default()
