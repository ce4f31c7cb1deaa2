from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from .price_provider import clamp_days

PUBLIC_API_BASE_URL = "https://api.coingecko.com/api/v3"
PRO_API_BASE_URL = "https://pro-api.coingecko.com/api/v3"

SYMBOL_TO_COINGECKO_ID: Dict[str, str] = {
    "BTC": "bitcoin",
    "ETH": "ethereum",
    "SOL": "solana",
    "DOGE": "dogecoin",
    "XRP": "ripple",
    "ADA": "cardano",
    "BNB": "binancecoin",
    "LTC": "litecoin",
}


def to_coingecko_id(symbol: str) -> str:
    """Map 'BTC', 'btc' or 'BTC/USDT' to a CoinGecko coin id."""
    base = symbol.split("/")[0].strip().upper()
    coin_id = SYMBOL_TO_COINGECKO_ID.get(base)
    if coin_id is None:
        raise ValueError(f"No CoinGecko id known for symbol {symbol!r}")
    return coin_id


@dataclass
class CoinGeckoPriceProvider:
    """Daily closes from CoinGecko /coins/{id}/market_chart.

    HTTP failures propagate; retrying is up to the caller.
    """

    base_url: str = PUBLIC_API_BASE_URL
    api_key: Optional[str] = None
    vs_currency: str = "usd"
    timeout_seconds: float = 15.0
    session: Optional[requests.Session] = None

    def __post_init__(self) -> None:
        if self.api_key is None:
            self.api_key = os.getenv("COINGECKO_API_KEY")

        env_base_url = os.getenv("COINGECKO_BASE_URL")
        if env_base_url:
            self.base_url = env_base_url
        elif self.api_key and not self.api_key.startswith("CG-"):
            # Demo keys ("CG-...") stay on the public host
            self.base_url = PRO_API_BASE_URL
        self.base_url = self.base_url.rstrip("/")

        if self.session is None:
            self.session = requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": "trendcast/0.1",
        }
        if self.api_key:
            if self.api_key.startswith("CG-"):
                headers["x-cg-demo-api-key"] = self.api_key
            else:
                headers["x-cg-pro-api-key"] = self.api_key
        return headers

    def get_market_chart(self, coin_id: str, days: int) -> Dict[str, Any]:
        url = f"{self.base_url}/coins/{coin_id}/market_chart"
        params = {
            "vs_currency": self.vs_currency,
            "days": int(days),
            "interval": "daily",
        }

        assert self.session is not None
        resp = self.session.get(url, params=params, headers=self._headers(), timeout=float(self.timeout_seconds))
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict) or not isinstance(data.get("prices"), list):
            raise ValueError("Unexpected CoinGecko market_chart response")
        return data

    def fetch_prices(self, symbol: str, days: int) -> List[float]:
        days = clamp_days(days)
        data = self.get_market_chart(to_coingecko_id(symbol), days)

        # rows are [timestamp_ms, price]; the last row is the live price
        closes = [float(row[1]) for row in data["prices"] if isinstance(row, (list, tuple)) and len(row) >= 2]
        return closes[-days:]
