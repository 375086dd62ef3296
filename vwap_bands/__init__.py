from .bar import Bar, bars_from_frame
from .errors import ConfigurationError, VWAPBandsError
from .indicators import DEFAULT_WINDOW, BandDirection, RollingVWAP, add_vwap_bands

__all__ = [
    "Bar",
    "bars_from_frame",
    "ConfigurationError",
    "VWAPBandsError",
    "DEFAULT_WINDOW",
    "BandDirection",
    "RollingVWAP",
    "add_vwap_bands",
]
