"""Pure numeric indicators over short price windows."""

from .technical import (
    daily_returns,
    ema,
    linear_r2,
    linear_slope,
    macd_lite,
    max_drawdown,
    mean_normalised_slope,
    round_half_up,
    rsi,
    sma,
    stddev,
    support_resistance,
    trend_consistency,
)

__all__ = [
    "sma",
    "ema",
    "rsi",
    "macd_lite",
    "linear_slope",
    "mean_normalised_slope",
    "support_resistance",
    "linear_r2",
    "trend_consistency",
    "daily_returns",
    "stddev",
    "max_drawdown",
    "round_half_up",
]
