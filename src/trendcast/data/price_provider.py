from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence

MIN_DAYS = 7
MAX_DAYS = 14

MOCK_BASE_PRICES: Dict[str, float] = {
    "AAPL": 182.50, "GOOGL": 141.80, "MSFT": 415.70,
    "TSLA": 175.20, "AMZN": 185.30, "META": 500.40,
    "RELIANCE": 2940.50, "TCS": 3720.00, "INFY": 1560.00,
    "HDFCBANK": 1620.80, "NIFTY": 25496.55, "SENSEX": 83721.18,
    "NVDA": 875.50, "AMD": 175.40, "SBIN": 810.30,
}
DEFAULT_BASE_PRICE = 150.0


def clamp_days(days: int) -> int:
    return max(MIN_DAYS, min(MAX_DAYS, int(days)))


def supported_symbols() -> List[str]:
    return sorted(MOCK_BASE_PRICES)


class PriceProvider(Protocol):
    def fetch_prices(self, symbol: str, days: int) -> List[float]:
        """Closing prices for the last `days` days, oldest first."""


@dataclass
class StaticPriceProvider:
    """Deterministic price feed for demos and tests.

    `series_by_symbol`: {"AAPL": [182.5, 183.1, ...]}; each call returns the
    last `days` values of the symbol's series.
    """

    series_by_symbol: Dict[str, Sequence[float]]

    def fetch_prices(self, symbol: str, days: int) -> List[float]:
        series = self.series_by_symbol.get(symbol.upper()) or self.series_by_symbol.get(symbol)
        if not series:
            return []
        return [float(p) for p in list(series)[-max(int(days), 1):]]


def generate_historical_prices(
    base_price: float,
    days: int = 10,
    drift: float = 0.001,
    sigma: float = 0.018,
    rng: Optional[random.Random] = None,
) -> List[float]:
    """Random walk with a daily drift and a uniform shock in [-sigma, sigma]."""
    rng = rng or random.Random()
    prices = [float(base_price)]
    for _ in range(1, int(days)):
        shock = (rng.random() - 0.5) * 2.0 * sigma
        prices.append(prices[-1] * (1.0 + drift + shock))
    return [round(p, 2) for p in prices]


@dataclass
class SyntheticPriceProvider:
    """Stand-in market data when no live feed is configured.

    Starts each walk from MOCK_BASE_PRICES (150 for unknown symbols). Pass a
    seed to make the generated series reproducible.
    """

    seed: Optional[int] = None
    base_prices: Dict[str, float] = field(default_factory=lambda: dict(MOCK_BASE_PRICES))
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def fetch_prices(self, symbol: str, days: int) -> List[float]:
        base = self.base_prices.get(symbol.upper(), DEFAULT_BASE_PRICE)
        # longer tickers (index names, Indian large caps) move less
        sigma = 0.012 if len(symbol) > 5 else 0.020
        drift = 0.002 if self._rng.random() > 0.5 else -0.001
        return generate_historical_prices(base, clamp_days(days), drift, sigma, rng=self._rng)
