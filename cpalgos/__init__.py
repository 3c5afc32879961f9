"""Classic competitive-programming algorithms: search, bits, DP, graphs and MSTs."""

__version__ = "0.1.0"