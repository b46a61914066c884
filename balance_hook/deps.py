"""Shared FastAPI dependencies."""

from fastapi import Request

from balance_hook.core.config import Settings, get_settings
from balance_hook.services.balance import BalanceStore


def get_balance_store(request: Request) -> BalanceStore | None:
    """Dependency: the store built at startup, or None if startup never connected.

    Callers turn a missing store into their own error so signature checks still run first.
    """
    return getattr(request.app.state, "balance_store", None)


def get_app_settings() -> Settings:
    return get_settings()
