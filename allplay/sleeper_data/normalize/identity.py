"""Roster/owner identity resolution."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from ..schema.models import Identity
from ._helpers import coerce_roster_id

logger = logging.getLogger(__name__)

AVATAR_BASE_URL = "https://sleepercdn.com/avatars"


def _first_metadata_value(metadata: Mapping[str, Any] | None, keys: Iterable[str]) -> str | None:
    if not isinstance(metadata, Mapping):
        return None
    for key in keys:
        value = metadata.get(key)
        if value:
            return str(value)
    return None


def _avatar_url(avatar_id: Any) -> str | None:
    if not avatar_id:
        return None
    avatar = str(avatar_id)
    if avatar.startswith("http://") or avatar.startswith("https://"):
        return avatar
    return f"{AVATAR_BASE_URL}/{avatar}"


def fallback_team_name(roster_id: int) -> str:
    return f"Roster {roster_id}"


def _mappings(raw: Any) -> list[Mapping[str, Any]]:
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, Mapping)]


class IdentityLookup:
    """Resolves ``roster_id`` to display metadata with graceful fallbacks."""

    def __init__(self, identities: Mapping[int, Identity] | None = None) -> None:
        self._identities: dict[int, Identity] = dict(identities or {})

    def __contains__(self, roster_id: object) -> bool:
        return roster_id in self._identities

    def __len__(self) -> int:
        return len(self._identities)

    def resolve(self, roster_id: int) -> Identity:
        identity = self._identities.get(roster_id)
        if identity is not None:
            return identity
        logger.debug("No identity for roster %s; using fallback label", roster_id)
        return Identity(roster_id=roster_id, team_name=fallback_team_name(roster_id))


def derive_identity(
    roster_id: int,
    raw_roster: Mapping[str, Any] | None,
    raw_user: Mapping[str, Any] | None,
) -> Identity:
    roster_metadata = (raw_roster or {}).get("metadata") or {}
    owner_id = (raw_roster or {}).get("owner_id")

    display_name = None
    avatar_id = None
    user_metadata: Mapping[str, Any] = {}
    if raw_user:
        display_name = raw_user.get("display_name") or raw_user.get("username")
        avatar_id = raw_user.get("avatar")
        user_metadata = raw_user.get("metadata") or {}
    if not avatar_id and isinstance(roster_metadata, Mapping):
        avatar_id = roster_metadata.get("avatar")

    team_name = (
        _first_metadata_value(roster_metadata, ("team_name", "name"))
        or _first_metadata_value(user_metadata, ("team_name",))
        or (str(display_name) if display_name else None)
        or fallback_team_name(roster_id)
    )

    return Identity(
        roster_id=roster_id,
        owner_id=str(owner_id) if owner_id is not None else None,
        team_name=team_name,
        manager_name=str(display_name) if display_name else None,
        avatar_url=_avatar_url(avatar_id),
    )


def build_identity_lookup(raw_rosters: Any, raw_users: Any) -> IdentityLookup:
    user_by_id: dict[str, Mapping[str, Any]] = {}
    for user in _mappings(raw_users):
        user_id = user.get("user_id")
        if user_id is not None:
            user_by_id[str(user_id)] = user

    identities: dict[int, Identity] = {}
    for raw_roster in _mappings(raw_rosters):
        roster_id = coerce_roster_id(raw_roster.get("roster_id"))
        if roster_id is None:
            continue
        owner_id = raw_roster.get("owner_id")
        user = user_by_id.get(str(owner_id)) if owner_id is not None else None
        identities[roster_id] = derive_identity(roster_id, raw_roster, user)
    return IdentityLookup(identities)


def coerce_identity(identity: Any) -> IdentityLookup:
    """Accept a prebuilt lookup or a ``{"rosters": [...], "users": [...]}`` mapping."""
    if isinstance(identity, IdentityLookup):
        return identity
    if not isinstance(identity, Mapping):
        return IdentityLookup()
    users = identity.get("users")
    if users is None:
        users = identity.get("owners")
    return build_identity_lookup(identity.get("rosters"), users)
