"""Equal split of an expense amount across participants."""

from collections.abc import Sequence
from decimal import Decimal, ROUND_DOWN


DEFAULT_SPLIT_QUANTUM = Decimal("0.01")


def compute_equal_shares(
    amount: Decimal,
    participant_ids: Sequence[int],
    quantum: Decimal | None = DEFAULT_SPLIT_QUANTUM,
) -> list[tuple[int, Decimal]]:
    """Divide an amount evenly across participants.

    With a quantum, every share is truncated to it and the non-negative
    remainder goes to the first participant, so the shares always add up to
    ``amount`` exactly. Without a quantum the plain quotient is used for every
    participant and the sum may differ from ``amount`` by the Decimal context
    precision.

    Args:
        amount: Positive total to divide.
        participant_ids: Ordered, non-empty participant ids.
        quantum: Smallest money unit, or None for unrounded division.

    Returns:
        list[tuple[int, Decimal]]: (participant id, share) in input order.

    Raises:
        ValueError: If there are no participants.
    """
    count = len(participant_ids)
    if count == 0:
        raise ValueError("Cannot split an expense across zero participants")

    if quantum is None:
        share = amount / count
        return [(participant_id, share) for participant_id in participant_ids]

    share = (amount / count).quantize(quantum, rounding=ROUND_DOWN)
    remainder = amount - share * count
    shares = [(participant_id, share) for participant_id in participant_ids]
    first_id, first_share = shares[0]
    shares[0] = (first_id, first_share + remainder)
    return shares


__all__ = ["DEFAULT_SPLIT_QUANTUM", "compute_equal_shares"]
