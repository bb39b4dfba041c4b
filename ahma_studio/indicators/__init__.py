"""Indicator primitives for the Adaptive Hull Moving Average pipeline."""

from .accelerated import hull_moving_average_numpy as hull_moving_average_numpy
from .accelerated import to_optional_list as to_optional_list
from .accelerated import weighted_moving_average_numpy as weighted_moving_average_numpy
from .adaptive import adaptive_smoothing_series as adaptive_smoothing_series
from .adaptive import efficiency_ratio as efficiency_ratio
from .adaptive import smoothing_bounds as smoothing_bounds
from .adaptive import smoothing_constant as smoothing_constant
from .ahma import BACKENDS as BACKENDS
from .ahma import AhmaOptions as AhmaOptions
from .ahma import AhmaResult as AhmaResult
from .ahma import ResolvedAhmaOptions as ResolvedAhmaOptions
from .ahma import calculate_ahma as calculate_ahma
from .ahma import options_as_dict as options_as_dict
from .ahma import resolve_options as resolve_options
from .ahma import sanitize_prices as sanitize_prices
from .common import OptionalFloat as OptionalFloat
from .common import is_present as is_present
from .common import round_half_up as round_half_up
from .common import safe_float as safe_float
from .common import sanitize_series as sanitize_series
from .moving_average import hull_difference_series as hull_difference_series
from .moving_average import hull_moving_average_series as hull_moving_average_series
from .moving_average import hull_window_lengths as hull_window_lengths
from .moving_average import weighted_moving_average_series as weighted_moving_average_series

__all__ = [
    "BACKENDS",
    "AhmaOptions",
    "AhmaResult",
    "OptionalFloat",
    "ResolvedAhmaOptions",
    "adaptive_smoothing_series",
    "calculate_ahma",
    "efficiency_ratio",
    "hull_difference_series",
    "hull_moving_average_numpy",
    "hull_moving_average_series",
    "hull_window_lengths",
    "is_present",
    "options_as_dict",
    "resolve_options",
    "round_half_up",
    "safe_float",
    "sanitize_prices",
    "sanitize_series",
    "smoothing_bounds",
    "smoothing_constant",
    "to_optional_list",
    "weighted_moving_average_numpy",
    "weighted_moving_average_series",
]
