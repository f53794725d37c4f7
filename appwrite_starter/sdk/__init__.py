"""Result-returning wrappers around the Appwrite Python SDK.

Every function takes an explicit ``AppwriteConfig`` as its first argument and
returns a ``Result`` that unpacks as ``value, error``::

    from appwrite_starter.config import AppwriteConfig
    from appwrite_starter.sdk import account

    config = AppwriteConfig.from_env()
    user, error = account.get_account(config)
"""

from appwrite_starter.sdk import account, avatars, databases, functions, locale, storage, teams
from appwrite_starter.sdk.client import Result, call, create_client

__all__ = [
    "Result",
    "account",
    "avatars",
    "call",
    "create_client",
    "databases",
    "functions",
    "locale",
    "storage",
    "teams",
]
