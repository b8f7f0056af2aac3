"""
Static shipping quote adapter.

Quotes from an in-memory destination table; unknown destinations have
no quote. Satisfies ShippingQuotePort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from testing_lab.components.storefront.models import ShippingQuote

logger = logging.getLogger(__name__)


@dataclass
class StaticShippingQuoteAdapter:
    # Destination names are matched case-insensitively
    quotes: dict[str, ShippingQuote] = field(default_factory=dict)

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        quote = self.quotes.get(destination.lower())
        logger.debug(f"Shipping quote for {destination}: {quote}")
        return quote

    def add_quote(self, destination: str, cost: float, estimated_days: int) -> None:
        self.quotes[destination.lower()] = ShippingQuote(cost=cost, estimated_days=estimated_days)
