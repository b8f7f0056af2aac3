"""
Static exchange rate adapter.

Serves rates from an in-memory table keyed by (from, to) currency pair.
Satisfies ExchangeRatePort.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_RATES: dict[tuple[str, str], float] = {
    ("USD", "EUR"): 0.92,
    ("USD", "GBP"): 0.79,
    ("USD", "AUD"): 1.52,
}


class UnknownCurrencyPairError(LookupError):
    def __init__(self, from_currency: str, to_currency: str) -> None:
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(f"No exchange rate for {from_currency}->{to_currency}")


@dataclass
class StaticExchangeRateAdapter:
    rates: dict[tuple[str, str], float] = field(default_factory=lambda: dict(DEFAULT_RATES))

    def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        if from_currency == to_currency:
            return 1.0

        rate = self.rates.get((from_currency, to_currency))
        if rate is None:
            # Inverse pair
            inverse = self.rates.get((to_currency, from_currency))
            if not inverse:
                raise UnknownCurrencyPairError(from_currency, to_currency)
            rate = 1 / inverse

        logger.debug(f"Exchange rate {from_currency}->{to_currency} = {rate}")
        return rate

    def set_rate(self, from_currency: str, to_currency: str, rate: float) -> None:
        self.rates[(from_currency, to_currency)] = rate
