# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


class GhostSpeakError(Exception):
    """Base class for all ghostspeak-engine errors."""

    def __init__(self, message: str, code: str = "ENGINE_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidEntityError(GhostSpeakError):
    """
    Raised when a ledger snapshot cannot be turned into a valid entity.

    Attributes:
        entity: Name of the entity model that rejected the data.
        errors: The individual field errors reported by pydantic.
    """

    def __init__(self, entity: str, errors: list[dict[str, Any]]) -> None:
        fields = sorted(
            {".".join(str(part) for part in err.get("loc", ())) or "<root>" for err in errors}
        )
        super().__init__(
            f"Invalid {entity} snapshot; rejected fields: {', '.join(fields)}.",
            code="INVALID_ENTITY",
        )
        self.entity = entity
        self.errors = errors


class InvalidAmountError(GhostSpeakError):
    """Raised when a human-entered token amount is malformed or not positive."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            f"Invalid amount {value!r}: {reason}.",
            code="INVALID_AMOUNT",
        )
        self.value = value
        self.reason = reason


class DraftRejectedError(GhostSpeakError):
    """
    Raised when a user-entered request breaks the program's creation rules.

    Attributes:
        kind: What was being drafted (``"escrow"``, ``"proposal"``, ...).
        problems: One message per broken rule, in check order.
    """

    def __init__(self, kind: str, problems: list[str]) -> None:
        super().__init__(
            f"Rejected {kind} request: {'; '.join(problems)}.",
            code="DRAFT_REJECTED",
        )
        self.kind = kind
        self.problems = problems


class ConfigurationError(GhostSpeakError):
    """Raised when the engine is misconfigured."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR")


def load_snapshot(model: type[M], data: Any) -> M:
    """
    Build a frozen entity from raw collaborator data.

    Pydantic validation failures are re-raised as :class:`InvalidEntityError`
    so the rendering shell can refuse a malformed entity without handling
    library-specific exceptions.

    Args:
        model: The entity model class (e.g. ``Escrow`` or ``Proposal``).
        data: A mapping or model instance holding the snapshot fields.

    Returns:
        A validated, immutable instance of ``model``.

    Raises:
        InvalidEntityError: If ``data`` does not describe a valid entity.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise InvalidEntityError(model.__name__, exc.errors()) from exc
