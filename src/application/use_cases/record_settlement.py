"""Use case for recording a direct payment between two members."""

from collections.abc import Callable
from datetime import datetime, timezone

from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    SettlementDraft,
)
from src.application.ports.membership_repository import (
    MembershipRepositoryPort,
)
from src.application.use_cases.expense_input import parse_amount
from src.application.use_cases.membership_guard import ensure_group_member
from src.domain.errors import LedgerTransactionError, LedgerValidationError
from src.domain.models.ledger import RecordedSettlement
from src.domain.services.history import UNKNOWN_MEMBER_NAME
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecordSettlementUseCase:
    """Record an immutable settlement between two group members."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        membership_repository: MembershipRepositoryPort,
        clock: Callable[[], datetime] | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port used to insert the settlement.
            membership_repository: Port answering membership questions.
            clock: Callable returning the creation timestamp.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._membership_repository = membership_repository
        self._clock = clock or _utc_now
        self._logger = logger or get_app_logger()

    def execute(
        self,
        group_id: int,
        actor_id: int,
        payer_id: int,
        receiver_id: int,
        amount,
    ) -> RecordedSettlement:
        """Record the settlement.

        Returns:
            RecordedSettlement: Stored settlement with both display names.

        Raises:
            NotGroupMemberError: If the actor is not in the group.
            LedgerValidationError: On a bad amount, payer == receiver, or a
                payer/receiver outside the group.
            LedgerTransactionError: If the insert failed.
        """
        ensure_group_member(
            self._membership_repository,
            group_id,
            actor_id,
            self._logger,
        )
        parsed_amount = parse_amount(amount)
        if payer_id == receiver_id:
            raise LedgerValidationError(
                "Payer and receiver cannot be the same",
                field="receiver_id",
            )
        if not self._membership_repository.is_member(group_id, payer_id):
            raise LedgerValidationError(
                "Payer is not a member of this group", field="payer_id"
            )
        if not self._membership_repository.is_member(group_id, receiver_id):
            raise LedgerValidationError(
                "Receiver is not a member of this group", field="receiver_id"
            )

        draft = SettlementDraft(
            group_id=group_id,
            payer_id=payer_id,
            receiver_id=receiver_id,
            amount=parsed_amount,
            created_at=self._clock(),
        )
        try:
            settlement = self._ledger_repository.insert_settlement(draft)
        except LedgerTransactionError:
            self._logger.error(
                f"Failed to record settlement in group {group_id}"
            )
            raise

        names = {
            member.member_id: member.display_name
            for member in self._membership_repository.fetch_members(group_id)
        }
        self._logger.info(
            f"Recorded settlement {settlement.settlement_id} in group "
            f"{group_id}: {payer_id} -> {receiver_id} {parsed_amount}"
        )
        return RecordedSettlement(
            settlement=settlement,
            payer_name=names.get(payer_id, UNKNOWN_MEMBER_NAME),
            receiver_name=names.get(receiver_id, UNKNOWN_MEMBER_NAME),
        )


__all__ = ["RecordSettlementUseCase"]
