"""Price sources for trendcast."""

from .coingecko_client import CoinGeckoPriceProvider, to_coingecko_id
from .price_provider import (
    MOCK_BASE_PRICES,
    PriceProvider,
    StaticPriceProvider,
    SyntheticPriceProvider,
    clamp_days,
    generate_historical_prices,
    supported_symbols,
)

__all__ = [
    "PriceProvider",
    "StaticPriceProvider",
    "SyntheticPriceProvider",
    "CoinGeckoPriceProvider",
    "MOCK_BASE_PRICES",
    "clamp_days",
    "generate_historical_prices",
    "supported_symbols",
    "to_coingecko_id",
]
