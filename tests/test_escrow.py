# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""
Tests for the escrow lifecycle — status predicates, deadline handling,
dispute gating, amount formatting and draft validation.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from ghostspeak_engine.config import EscrowConfig
from ghostspeak_engine.errors import DraftRejectedError, InvalidEntityError, load_snapshot
from ghostspeak_engine.escrow import (
    Dispute,
    DisputeDraft,
    DisputeStatus,
    Escrow,
    EscrowAction,
    EscrowDraft,
    EscrowStatus,
    allowed_actions,
    can_cancel,
    can_dispute,
    can_release,
    duration,
    formatted_amount,
    has_open_dispute,
    is_active,
    is_overdue,
    is_settled,
    status_glyph,
    time_until_deadline,
    validate_dispute_draft,
    validate_escrow_draft,
)
from ghostspeak_engine.money import token_info
from ghostspeak_engine.types import MAX_UNITS

from tests._data import AGENT, NEW_YORK, NOW

MakeEscrow = Callable[..., Escrow]

OPEN_DISPUTE = Dispute(status=DisputeStatus.OPEN, initiator=AGENT, reason="late delivery")
RESOLVED_DISPUTE = Dispute(status=DisputeStatus.RESOLVED, initiator=AGENT, reason="late delivery")


def _escrow_in(make_escrow: MakeEscrow, status: EscrowStatus) -> Escrow:
    """A valid escrow in ``status`` with no dispute unless the status requires one."""
    dispute = OPEN_DISPUTE if status is EscrowStatus.DISPUTED else None
    return make_escrow(status=status, dispute=dispute)


# ---------------------------------------------------------------------------
# TestStatusPredicates
# ---------------------------------------------------------------------------


# status -> (active, release, dispute, cancel)
MATRIX = {
    EscrowStatus.CREATED: (False, False, False, True),
    EscrowStatus.FUNDED: (True, True, True, True),
    EscrowStatus.IN_PROGRESS: (True, True, True, False),
    EscrowStatus.COMPLETED: (False, False, False, False),
    EscrowStatus.RELEASED: (False, False, False, False),
    EscrowStatus.DISPUTED: (False, False, False, False),
    EscrowStatus.CANCELLED: (False, False, False, False),
}


class TestStatusPredicates:
    def test_matrix_covers_every_status(self) -> None:
        assert set(MATRIX) == set(EscrowStatus)

    @pytest.mark.parametrize("status", list(EscrowStatus))
    def test_predicates_follow_matrix(self, make_escrow: MakeEscrow, status: EscrowStatus) -> None:
        escrow = _escrow_in(make_escrow, status)
        flags = (is_active(escrow), can_release(escrow), can_dispute(escrow), can_cancel(escrow))
        assert flags == MATRIX[status]

    @pytest.mark.parametrize("status", list(EscrowStatus))
    def test_allowed_actions_agree_with_predicates(
        self, make_escrow: MakeEscrow, status: EscrowStatus
    ) -> None:
        escrow = _escrow_in(make_escrow, status)
        actions = allowed_actions(escrow)
        assert (EscrowAction.RELEASE in actions) == can_release(escrow)
        assert (EscrowAction.DISPUTE in actions) == can_dispute(escrow)
        assert (EscrowAction.CANCEL in actions) == can_cancel(escrow)

    def test_settled_statuses(self, make_escrow: MakeEscrow) -> None:
        assert is_settled(make_escrow(status=EscrowStatus.RELEASED)) is True
        assert is_settled(make_escrow(status=EscrowStatus.CANCELLED)) is True
        assert is_settled(make_escrow(status=EscrowStatus.COMPLETED)) is False

    def test_predicates_are_idempotent(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow()
        assert allowed_actions(escrow) == allowed_actions(escrow)
        assert is_overdue(escrow, NOW) == is_overdue(escrow, NOW)


# ---------------------------------------------------------------------------
# TestDisputeGating
# ---------------------------------------------------------------------------


class TestDisputeGating:
    def test_open_dispute_blocks_every_action(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(status=EscrowStatus.FUNDED, dispute=OPEN_DISPUTE)
        assert has_open_dispute(escrow) is True
        assert allowed_actions(escrow) == frozenset()

    def test_under_review_counts_as_open(self, make_escrow: MakeEscrow) -> None:
        dispute = Dispute(status=DisputeStatus.UNDER_REVIEW, initiator=AGENT)
        escrow = make_escrow(status=EscrowStatus.IN_PROGRESS, dispute=dispute)
        assert can_release(escrow) is False

    def test_resolved_dispute_allows_release_and_new_dispute(
        self, make_escrow: MakeEscrow
    ) -> None:
        escrow = make_escrow(status=EscrowStatus.IN_PROGRESS, dispute=RESOLVED_DISPUTE)
        assert has_open_dispute(escrow) is False
        assert can_release(escrow) is True
        assert can_dispute(escrow) is True

    def test_closed_dispute_allows_release(self, make_escrow: MakeEscrow) -> None:
        dispute = Dispute(status=DisputeStatus.CLOSED, initiator=AGENT)
        assert can_release(make_escrow(dispute=dispute)) is True


# ---------------------------------------------------------------------------
# TestCancellation
# ---------------------------------------------------------------------------


class TestCancellation:
    def test_work_start_signal_blocks_cancel(self, make_escrow: MakeEscrow) -> None:
        assert can_cancel(make_escrow(work_started=True)) is False

    def test_missing_signal_falls_back_to_status_and_dispute(
        self, make_escrow: MakeEscrow
    ) -> None:
        assert can_cancel(make_escrow(work_started=None)) is True
        assert can_cancel(make_escrow(work_started=False)) is True

    def test_open_dispute_blocks_cancel(self, make_escrow: MakeEscrow) -> None:
        assert can_cancel(make_escrow(dispute=OPEN_DISPUTE)) is False


# ---------------------------------------------------------------------------
# TestDeadlines
# ---------------------------------------------------------------------------


class TestDeadlines:
    def test_no_deadline_is_never_overdue(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(deadline=None)
        assert is_overdue(escrow, NOW) is False
        assert time_until_deadline(escrow, NOW) is None

    def test_past_deadline_on_open_escrow_is_overdue(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(deadline=NOW - timedelta(hours=2))
        assert is_overdue(escrow, NOW) is True
        assert time_until_deadline(escrow, NOW) == timedelta(hours=-2)

    def test_exactly_at_deadline_is_not_overdue(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(deadline=NOW)
        assert is_overdue(escrow, NOW) is False
        assert time_until_deadline(escrow, NOW) == timedelta(0)

    @pytest.mark.parametrize(
        "status",
        [EscrowStatus.COMPLETED, EscrowStatus.RELEASED, EscrowStatus.CANCELLED],
    )
    def test_finished_escrows_are_never_overdue(
        self, make_escrow: MakeEscrow, status: EscrowStatus
    ) -> None:
        escrow = make_escrow(status=status, deadline=NOW - timedelta(days=10))
        assert is_overdue(escrow, NOW) is False

    def test_disputed_escrow_past_deadline_is_overdue(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(
            status=EscrowStatus.DISPUTED,
            dispute=OPEN_DISPUTE,
            deadline=NOW - timedelta(days=1),
        )
        assert is_overdue(escrow, NOW) is True

    def test_future_deadline_reports_time_left(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(deadline=NOW + timedelta(days=4))
        assert time_until_deadline(escrow, NOW) == timedelta(days=4)
        assert is_overdue(escrow, NOW) is False


# ---------------------------------------------------------------------------
# TestDurationAndFormatting
# ---------------------------------------------------------------------------


class TestDurationAndFormatting:
    def test_open_escrow_runs_until_now(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(created_at=NOW - timedelta(days=3))
        assert duration(escrow, NOW) == timedelta(days=3)

    def test_released_escrow_stops_at_release(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(
            status=EscrowStatus.RELEASED,
            created_at=NOW - timedelta(days=10),
            released_at=NOW - timedelta(days=4),
        )
        assert duration(escrow, NOW) == timedelta(days=6)
        assert duration(escrow, NOW + timedelta(days=30)) == timedelta(days=6)

    def test_cancelled_escrow_stops_at_cancellation(self, make_escrow: MakeEscrow) -> None:
        escrow = make_escrow(
            status=EscrowStatus.CANCELLED,
            created_at=NOW - timedelta(days=2),
            cancelled_at=NOW - timedelta(days=1),
        )
        assert duration(escrow, NOW) == timedelta(days=1)

    def test_local_times_count_real_time_across_dst_change(
        self, make_escrow: MakeEscrow
    ) -> None:
        escrow = make_escrow(
            created_at=datetime(2025, 3, 8, 12, 0, tzinfo=NEW_YORK),
            deadline=datetime(2025, 3, 10, 12, 0, tzinfo=NEW_YORK),
        )
        checked_at = datetime(2025, 3, 10, 12, 0, tzinfo=NEW_YORK)
        assert duration(escrow, checked_at) == timedelta(days=1, hours=23)
        assert time_until_deadline(escrow, escrow.created_at) == timedelta(days=1, hours=23)

    def test_formatted_amount_uses_token_decimals(self, make_escrow: MakeEscrow) -> None:
        assert formatted_amount(make_escrow()) == "2.500000000 SOL"
        usdc = make_escrow(amount=1_250_000, token=token_info("USDC"))
        assert formatted_amount(usdc) == "1.250000 USDC"

    def test_every_status_has_a_distinct_glyph(self) -> None:
        glyphs = [status_glyph(status) for status in EscrowStatus]
        assert all(glyphs)
        assert len(set(glyphs)) == len(glyphs)

    def test_glyph_accepts_raw_status_value(self) -> None:
        assert status_glyph("funded") == status_glyph(EscrowStatus.FUNDED)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# TestConstruction
# ---------------------------------------------------------------------------


class TestConstruction:
    def _payload(self, **overrides: object) -> dict[str, object]:
        payload: dict[str, object] = {
            "id": "esc-raw",
            "client": "client-address",
            "agent": AGENT,
            "amount": 5_000_000,
            "token": {"symbol": "USDC", "decimals": 6},
            "status": "in_progress",
            "created_at": "2025-05-20T08:00:00Z",
            "funded_at": "2025-05-20T09:00:00Z",
            "milestones": ["draft", "final"],
        }
        payload.update(overrides)
        return payload

    def test_raw_payload_builds_escrow(self) -> None:
        escrow = load_snapshot(Escrow, self._payload())
        assert escrow.status is EscrowStatus.IN_PROGRESS
        assert escrow.milestones == ("draft", "final")

    def test_unrecognised_status_is_rejected(self) -> None:
        with pytest.raises(InvalidEntityError):
            load_snapshot(Escrow, self._payload(status="pending"))

    def test_amount_beyond_ledger_range_is_rejected(self) -> None:
        with pytest.raises(InvalidEntityError) as exc_info:
            load_snapshot(Escrow, self._payload(amount=MAX_UNITS + 1))
        assert "amount" in exc_info.value.message

    def test_largest_ledger_amount_formats(self) -> None:
        escrow = load_snapshot(Escrow, self._payload(amount=MAX_UNITS))
        assert formatted_amount(escrow) == "18446744073709.551615 USDC"

    def test_local_timestamps_are_stored_as_utc(self) -> None:
        escrow = load_snapshot(Escrow, self._payload(created_at="2025-05-20T04:00:00-04:00"))
        assert escrow.created_at.tzinfo is timezone.utc
        assert escrow.created_at.hour == 8

    def test_negative_amount_is_rejected(self) -> None:
        with pytest.raises(InvalidEntityError):
            load_snapshot(Escrow, self._payload(amount=-1))

    def test_unfunded_escrow_cannot_have_funded_at(self) -> None:
        with pytest.raises(InvalidEntityError):
            load_snapshot(Escrow, self._payload(status="created"))

    def test_disputed_escrow_requires_dispute(self) -> None:
        with pytest.raises(InvalidEntityError):
            load_snapshot(Escrow, self._payload(status="disputed"))


# ---------------------------------------------------------------------------
# TestDrafts
# ---------------------------------------------------------------------------


class TestDrafts:
    def _draft(self, **overrides: object) -> EscrowDraft:
        fields: dict[str, object] = {
            "agent": AGENT,
            "amount": 1_000_000,
            "token": token_info("SOL"),
            "description": "Translate product docs",
            "deadline": NOW + timedelta(days=7),
        }
        fields.update(overrides)
        return EscrowDraft(**fields)

    def test_valid_draft_passes(self) -> None:
        validate_escrow_draft(self._draft(), NOW)

    def test_every_broken_rule_is_reported(self) -> None:
        draft = self._draft(agent=" ", amount=10, description="", deadline=NOW)
        with pytest.raises(DraftRejectedError) as exc_info:
            validate_escrow_draft(draft, NOW)
        assert len(exc_info.value.problems) == 4
        assert exc_info.value.kind == "escrow"

    def test_description_length_uses_config(self) -> None:
        config = EscrowConfig(max_description_length=10)
        with pytest.raises(DraftRejectedError, match="at most 10 characters"):
            validate_escrow_draft(self._draft(description="x" * 11), NOW, config)

    def test_dispute_reason_is_required(self) -> None:
        with pytest.raises(DraftRejectedError):
            validate_dispute_draft(DisputeDraft(reason="   "))
        validate_dispute_draft(DisputeDraft(reason="work not delivered"))
