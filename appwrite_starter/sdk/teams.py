"""Teams and membership wrappers."""

from __future__ import annotations

from appwrite.services.teams import Teams

from ..config import AppwriteConfig
from .client import Result, call, create_client


def _teams(config: AppwriteConfig) -> Teams:
    return Teams(create_client(config))


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------


def create_team(config: AppwriteConfig, team_id: str, name: str, roles: list[str] | None = None) -> Result:
    """Create a team; the caller becomes its owner."""
    return call(_teams(config).create, team_id=team_id, name=name, roles=roles)


def list_teams(config: AppwriteConfig, queries: list[str] | None = None, search: str | None = None) -> Result:
    return call(_teams(config).list, queries=queries, search=search)


def get_team(config: AppwriteConfig, team_id: str) -> Result:
    return call(_teams(config).get, team_id=team_id)


def update_team(config: AppwriteConfig, team_id: str, name: str) -> Result:
    """Rename a team. Only owners may do this."""
    return call(_teams(config).update_name, team_id=team_id, name=name)


def delete_team(config: AppwriteConfig, team_id: str) -> Result:
    return call(_teams(config).delete, team_id=team_id)


# ---------------------------------------------------------------------------
# Memberships
# ---------------------------------------------------------------------------


def create_membership(
    config: AppwriteConfig,
    team_id: str,
    roles: list[str],
    email: str | None = None,
    url: str | None = None,
    name: str | None = None,
) -> Result:
    """Invite *email* to the team; the invitation links back to *url*."""
    return call(
        _teams(config).create_membership,
        team_id=team_id,
        roles=roles,
        email=email,
        url=url,
        name=name,
    )


def update_membership_roles(
    config: AppwriteConfig,
    team_id: str,
    membership_id: str,
    roles: list[str],
) -> Result:
    return call(
        _teams(config).update_membership,
        team_id=team_id,
        membership_id=membership_id,
        roles=roles,
    )


def list_memberships(
    config: AppwriteConfig,
    team_id: str,
    queries: list[str] | None = None,
    search: str | None = None,
) -> Result:
    return call(_teams(config).list_memberships, team_id=team_id, queries=queries, search=search)


def update_membership_status(
    config: AppwriteConfig,
    team_id: str,
    membership_id: str,
    user_id: str,
    secret: str,
) -> Result:
    """Accept an invitation with the secret from the invitation e-mail."""
    return call(
        _teams(config).update_membership_status,
        team_id=team_id,
        membership_id=membership_id,
        user_id=user_id,
        secret=secret,
    )


def delete_membership(config: AppwriteConfig, team_id: str, membership_id: str) -> Result:
    """Leave a team, or remove another member when called by an owner."""
    return call(_teams(config).delete_membership, team_id=team_id, membership_id=membership_id)
