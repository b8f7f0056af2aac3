"""
Storefront component ports.

Protocol interfaces for the collaborators the storefront delegates to.
Each is injected by the caller; tests substitute doubles.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from testing_lab.components.storefront.models import CreditCard, PaymentResult, ShippingQuote


class ExchangeRatePort(Protocol):
    """Currency conversion rates."""

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """Return units of ``to_currency`` per unit of ``from_currency``."""
        ...


class ShippingQuotePort(Protocol):
    """Shipping quote provider."""

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """
        Quote shipping to a destination.

        Returns:
            ShippingQuote, or None when shipping is unavailable
        """
        ...


class AnalyticsTrackerPort(Protocol):
    """Page view tracking. Fire-and-forget."""

    def track_page_view(self, path: str) -> None: ...


class PaymentPort(Protocol):
    """Payment processor."""

    async def charge(self, card: CreditCard, amount: float) -> PaymentResult:
        """
        Charge a card.

        Args:
            card: Card to charge
            amount: Amount in the base currency

        Returns:
            PaymentResult with status "success" or "failed"
        """
        ...


class EmailSenderPort(Protocol):
    """Transactional email sender."""

    async def send_email(self, to: str, body: str) -> None:
        """Send ``body`` to ``to``."""
        ...


class SecurityCodePort(Protocol):
    """One-time login code generator."""

    def generate_code(self) -> int: ...


class ClockPort(Protocol):
    def now(self) -> datetime:
        """Return current local time."""
        ...
