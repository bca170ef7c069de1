"""Technical analysis: candles, time series, indicators, rules, strategies and trade analysis."""

__version__ = "0.1.0"