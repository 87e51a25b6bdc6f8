# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations

from ghostspeak_engine.errors import DraftRejectedError
from ghostspeak_engine.governance.model import MultisigDraft

MIN_OWNERS = 2
MAX_OWNERS = 10


def validate_multisig_draft(draft: MultisigDraft) -> None:
    """
    Check a multisig wallet request against the governance program's limits.

    A wallet needs between 2 and 10 owners, and a signature threshold of at
    least 1 that does not exceed the owner count.

    Raises:
        DraftRejectedError: Listing every rule the draft breaks.
    """
    problems: list[str] = []
    owners = len(draft.owners)
    if owners < MIN_OWNERS:
        problems.append(f"a multisig needs at least {MIN_OWNERS} owners")
    elif owners > MAX_OWNERS:
        problems.append(f"a multisig allows at most {MAX_OWNERS} owners")
    if draft.threshold == 0:
        problems.append("threshold must be at least 1")
    elif draft.threshold > owners:
        problems.append(f"threshold {draft.threshold} exceeds the {owners} owners")
    if problems:
        raise DraftRejectedError("multisig", problems)
