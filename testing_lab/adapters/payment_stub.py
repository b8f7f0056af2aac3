"""
Payment stub adapter (dev).

Stub implementation of PaymentPort that approves every charge.
Can be configured to decline for testing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from testing_lab.components.storefront.models import CreditCard, PaymentResult, PaymentStatus
from testing_lab.components.storefront.ports import PaymentPort

logger = logging.getLogger(__name__)


@dataclass
class PaymentStubAdapter:
    """
    Stub payment adapter.

    Returns "success" unless an override is set. Records every charge.
    """

    _override_status: PaymentStatus | None = None
    _declined_cards: set[str] = field(default_factory=set)
    charges: list[tuple[CreditCard, float]] = field(default_factory=list)

    async def charge(self, card: CreditCard, amount: float) -> PaymentResult:
        status = self._get_status_for_card(card)
        self.charges.append((card, amount))

        logger.debug(
            f"PaymentStubAdapter.charge: "
            f"card=****{card.credit_card_number[-4:]}, amount={amount}, status={status}"
        )

        return PaymentResult(status=status)

    def _get_status_for_card(self, card: CreditCard) -> PaymentStatus:
        if card.credit_card_number in self._declined_cards:
            return "failed"

        if self._override_status:
            return self._override_status

        return "success"

    # --- Testing Helpers ---

    def set_override_status(self, status: PaymentStatus | None) -> None:
        """Set global status override for testing."""
        self._override_status = status

    def decline_card(self, credit_card_number: str) -> None:
        """Always fail charges to this card (testing)."""
        self._declined_cards.add(credit_card_number)

    def clear_overrides(self) -> None:
        self._override_status = None
        self._declined_cards = set()


def _verify_protocol_compliance() -> None:
    """Verify PaymentStubAdapter satisfies PaymentPort protocol."""
    adapter: PaymentPort = PaymentStubAdapter()
    _ = adapter


_verify_protocol_compliance()
