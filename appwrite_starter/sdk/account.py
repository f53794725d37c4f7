"""Account service wrappers.

Sessions, registration, preferences, recovery and e-mail verification for the
user the configured client acts as.
"""

from __future__ import annotations

from typing import Any

from appwrite.services.account import Account

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _account(config: AppwriteConfig) -> Account:
    return Account(create_client(config))


# ---------------------------------------------------------------------------
# Registration & sessions
# ---------------------------------------------------------------------------


def create_account(
    config: AppwriteConfig,
    user_id: str,
    email: str,
    password: str,
    name: str | None = None,
) -> Result:
    """Register a new account. Use ``"unique()"`` as *user_id* to let Appwrite pick one."""
    return call(_account(config).create, user_id=user_id, email=email, password=password, name=name)


def create_email_session(config: AppwriteConfig, email: str, password: str) -> Result:
    """Log in with an e-mail and password combination."""
    return call(_account(config).create_email_password_session, email=email, password=password)


def create_anonymous_session(config: AppwriteConfig) -> Result:
    return call(_account(config).create_anonymous_session)


def create_magic_url_token(
    config: AppwriteConfig,
    user_id: str,
    email: str,
    url: str | None = None,
) -> Result:
    """Send a magic-link login e-mail redirecting to *url*."""
    return call(_account(config).create_magic_url_token, user_id=user_id, email=email, url=url)


def update_magic_url_session(config: AppwriteConfig, user_id: str, secret: str) -> Result:
    """Complete a magic-link login with the secret from the redirect."""
    return call(_account(config).update_magic_url_session, user_id=user_id, secret=secret)


def create_oauth2_token(
    config: AppwriteConfig,
    provider: str,
    success: str | None = None,
    failure: str | None = None,
    scopes: list[str] | None = None,
) -> Result:
    """Start an OAuth2 login; the value is the provider redirect URL."""
    return call(
        _account(config).create_o_auth2_token,
        provider=provider,
        success=success,
        failure=failure,
        scopes=scopes,
    )


def create_jwt(config: AppwriteConfig) -> Result:
    return call(_account(config).create_jwt)


def list_sessions(config: AppwriteConfig) -> Result:
    return call(_account(config).list_sessions)


def get_session(config: AppwriteConfig, session_id: str = "current") -> Result:
    return call(_account(config).get_session, session_id=session_id)


def delete_session(config: AppwriteConfig, session_id: str = "current") -> Result:
    """Log out of one session; ``"current"`` is the session in use."""
    return call(_account(config).delete_session, session_id=session_id)


def delete_sessions(config: AppwriteConfig) -> Result:
    """Log out of every session of the user."""
    return call(_account(config).delete_sessions)


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


def get_account(config: AppwriteConfig) -> Result:
    return call(_account(config).get)


def get_prefs(config: AppwriteConfig) -> Result:
    return call(_account(config).get_prefs)


def list_logs(config: AppwriteConfig, queries: list[str] | None = None) -> Result:
    return call(_account(config).list_logs, queries=queries)


def update_name(config: AppwriteConfig, name: str) -> Result:
    return call(_account(config).update_name, name=name)


def update_password(config: AppwriteConfig, password: str, old_password: str | None = None) -> Result:
    """Change the password. *old_password* is optional for OAuth-only users."""
    return call(_account(config).update_password, password=password, old_password=old_password)


def update_email(config: AppwriteConfig, email: str, password: str) -> Result:
    return call(_account(config).update_email, email=email, password=password)


def update_prefs(config: AppwriteConfig, prefs: dict[str, Any]) -> Result:
    """Replace the user's preferences object."""
    return call(_account(config).update_prefs, prefs=prefs)


# ---------------------------------------------------------------------------
# Recovery & verification
# ---------------------------------------------------------------------------


def create_recovery(config: AppwriteConfig, email: str, url: str) -> Result:
    """Send a password-recovery e-mail linking back to *url*."""
    return call(_account(config).create_recovery, email=email, url=url)


def update_recovery(config: AppwriteConfig, user_id: str, secret: str, password: str) -> Result:
    """Set a new password with the secret from the recovery e-mail."""
    return call(_account(config).update_recovery, user_id=user_id, secret=secret, password=password)


def create_email_verification(config: AppwriteConfig, url: str) -> Result:
    return call(_account(config).create_verification, url=url)


def update_email_verification(config: AppwriteConfig, user_id: str, secret: str) -> Result:
    return call(_account(config).update_verification, user_id=user_id, secret=secret)
