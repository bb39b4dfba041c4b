"""Adaptive Hull Moving Average (AHMA) toolkit."""

from ahma_studio.indicators.ahma import AhmaOptions, AhmaResult, calculate_ahma

__version__ = "0.1.0"

__all__ = ["AhmaOptions", "AhmaResult", "__version__", "calculate_ahma"]
