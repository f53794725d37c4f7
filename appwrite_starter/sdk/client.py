"""Appwrite client construction and the ``Result`` convention.

Every wrapper in this package calls exactly one SDK method through
:func:`call` and hands back a ``Result``: ``(value, None)`` when the SDK
returned, ``(None, error)`` when it raised ``AppwriteException``. The SDK wraps
transport failures in ``AppwriteException`` as well, so any other exception is
a programming error and propagates.

Typical usage::

    config = AppwriteConfig(endpoint="https://host/v1", project="demo", key="...")
    user, error = get_account(config)
    if error:
        print(error.code, error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NamedTuple

from appwrite.client import Client
from appwrite.exception import AppwriteException

from ..config import AppwriteConfig


class Result(NamedTuple):
    """Outcome of one SDK call. Unpacks as ``value, error``."""

    value: Any
    error: AppwriteException | None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_client(config: AppwriteConfig) -> Client:
    """Return a new SDK ``Client`` configured from *config*."""
    client = Client()
    client.set_endpoint(config.endpoint)
    client.set_project(config.project)
    if config.key:
        client.set_key(config.key)
    if config.jwt:
        client.set_jwt(config.jwt)
    if config.self_signed:
        client.set_self_signed(True)
    return client


def call(func: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Result:
    """Invoke *func* and fold its outcome into a ``Result``."""
    try:
        return Result(func(*args, **kwargs), None)
    except AppwriteException as error:
        return Result(None, error)
