"""Read-only role lookup, seeded once at startup."""

import logging
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType
from typing import Optional

import yaml

from profile_optimizer.roles.builtin import BUILTIN_ROLES
from profile_optimizer.roles.models import TargetRole

logger = logging.getLogger("profile_optimizer.roles")


def normalize_role_name(name: str) -> str:
    """Lowercase and turn URL slugs ('pe-operating-partner') into names."""
    return name.replace("-", " ").strip().lower()


class RoleRegistry:
    """Immutable, ordered, case-insensitive map of target roles."""

    def __init__(self, roles: Iterable[TargetRole]):
        table: dict[str, TargetRole] = {}
        for role in roles:
            # Re-registering a name replaces the role but keeps its position.
            table[role.key] = role
        self._roles = MappingProxyType(table)

    def get_role(self, name: str) -> Optional[TargetRole]:
        """Look up a role by name (case-insensitive) or URL slug."""
        role = self._roles.get(name.lower())
        if role is None:
            role = self._roles.get(normalize_role_name(name))
        return role

    def list_roles(self) -> list[TargetRole]:
        """All roles in registration order."""
        return list(self._roles.values())

    def names(self) -> list[str]:
        return [role.name for role in self._roles.values()]

    def __contains__(self, name: str) -> bool:
        return self.get_role(name) is not None

    def __len__(self) -> int:
        return len(self._roles)


def build_registry(extra_roles: Iterable[TargetRole] = ()) -> RoleRegistry:
    """Create a registry of the built-in roles plus any user-defined ones."""
    return RoleRegistry([*BUILTIN_ROLES, *extra_roles])


def require_role(registry: RoleRegistry, name: str) -> TargetRole:
    """Boundary lookup: raise for unknown role names instead of returning None."""
    role = registry.get_role(name)
    if role is None:
        raise ValueError(
            f"Unknown role: {name!r} (available: {', '.join(registry.names())})"
        )
    return role


def load_roles_file(roles_path: str) -> list[TargetRole]:
    """Load additional role definitions from a YAML file.

    The file holds either a list of role mappings or a mapping with a
    top-level ``roles`` list.
    """
    path = Path(roles_path)
    if not path.exists():
        raise FileNotFoundError(f"Roles file not found: {roles_path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or []

    if isinstance(raw, dict):
        raw = raw.get("roles", [])
    if not isinstance(raw, list):
        raise ValueError(f"Roles file must contain a list of roles: {roles_path}")

    roles = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValueError(f"Invalid role entry in {roles_path}: {item!r}")
        roles.append(TargetRole.from_dict(item))
    logger.info("Loaded %d custom role(s) from %s", len(roles), roles_path)
    return roles


# Default registry for callers that do not configure custom roles.
DEFAULT_REGISTRY = build_registry()


def get_role(name: str) -> Optional[TargetRole]:
    return DEFAULT_REGISTRY.get_role(name)


def list_roles() -> list[TargetRole]:
    return DEFAULT_REGISTRY.list_roles()
