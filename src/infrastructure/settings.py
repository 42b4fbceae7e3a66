"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from typing import Optional

from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.services.splitting import DEFAULT_SPLIT_QUANTUM
from src.infrastructure.logging.logger import get_app_logger


_DISABLED_QUANTUM_VALUES = ("none", "off", "exact")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger engine.

    Attributes:
        split_quantum: Rounding unit for equal splits, or None to keep plain
            division.
        currency_code: Currency shown next to amounts in adapters.
    """

    split_quantum: Optional[Decimal] = DEFAULT_SPLIT_QUANTUM
    currency_code: str = DEFAULT_CURRENCY_CODE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_quantum = os.getenv("LEDGER_SPLIT_QUANTUM")
        split_quantum = DEFAULT_SPLIT_QUANTUM
        if raw_quantum:
            split_quantum = cls._parse_quantum(raw_quantum, logger=logger)
        currency_code = (
            os.getenv("LEDGER_CURRENCY", DEFAULT_CURRENCY_CODE).strip().upper()
            or DEFAULT_CURRENCY_CODE
        )
        return cls(split_quantum=split_quantum, currency_code=currency_code)

    @staticmethod
    def _parse_quantum(raw_value: str, logger) -> Decimal | None:
        """Parse the split quantum setting.

        Args:
            raw_value: Raw environment value such as ``0.01`` or ``none``.
            logger: Logger used for warnings.

        Returns:
            Decimal | None: Parsed quantum, None when rounding is disabled.
        """
        cleaned = raw_value.strip().lower()
        if cleaned in _DISABLED_QUANTUM_VALUES:
            return None
        try:
            quantum = Decimal(cleaned)
        except InvalidOperation:
            quantum = None
        if quantum is None or not quantum.is_finite() or quantum <= 0:
            logger.warning(
                f"Invalid LEDGER_SPLIT_QUANTUM={raw_value!r}; "
                f"using {DEFAULT_SPLIT_QUANTUM}"
            )
            return DEFAULT_SPLIT_QUANTUM
        return quantum


__all__ = ["LedgerSettings"]
