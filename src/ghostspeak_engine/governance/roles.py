# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Role-based permission matrix mirrored from the governance program.

The ledger is authoritative; this table only lets the shell hide actions a
role could never perform.
"""
from __future__ import annotations

from enum import Enum

from ghostspeak_engine.types import exhaustive


class Role(str, Enum):
    ADMIN = "admin"
    MODERATOR = "moderator"
    VERIFIER = "verifier"
    USER = "user"


class Permission(str, Enum):
    CREATE_PROPOSAL = "create_proposal"
    VOTE = "vote"
    EXECUTE_PROPOSAL = "execute_proposal"
    CANCEL_PROPOSAL = "cancel_proposal"
    VETO_PROPOSAL = "veto_proposal"
    GRANT_ROLE = "grant_role"
    REVOKE_ROLE = "revoke_role"
    VERIFY_AGENT = "verify_agent"
    MANAGE_TREASURY = "manage_treasury"
    UPGRADE_PROGRAM = "upgrade_program"
    EMERGENCY_ACTION = "emergency_action"


_P = Permission

_ROLE_PERMISSIONS = exhaustive(
    Role,
    {
        Role.ADMIN: frozenset(Permission),
        Role.MODERATOR: frozenset(
            {_P.CREATE_PROPOSAL, _P.VOTE, _P.CANCEL_PROPOSAL, _P.VERIFY_AGENT}
        ),
        Role.VERIFIER: frozenset({_P.VOTE, _P.VERIFY_AGENT}),
        Role.USER: frozenset({_P.VOTE}),
    },
)


def role_permissions(role: Role | str) -> frozenset[Permission]:
    """Every permission granted to ``role``."""
    return _ROLE_PERMISSIONS[Role(role)]


def has_permission(role: Role | str, permission: Permission | str) -> bool:
    return Permission(permission) in role_permissions(role)
