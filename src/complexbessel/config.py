"""Numerical settings shared by the series evaluators"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesConfig:
    """Truncation and limit settings for the Bessel series"""

    tolerance: float = 1.0e-8
    """Stop summing once |term / sum| drops below this.

    Also the magnitude under which the leading term counts as zero.
    """
    limit_offset: float = 1.0e-3
    """Order offset used to take the limit of Y and K at integer orders

    The achieved accuracy there is about limit_offset**2, not tolerance.
    """
    max_terms: int = 500
    """Maximum number of terms summed before giving up"""

    def __post_init__(self):
        if not self.tolerance > 0.0:
            raise ValueError("tolerance must be positive")
        # n +- limit_offset must never land on an integer
        if not 0.0 < self.limit_offset < 0.5:
            raise ValueError("limit_offset must be in (0, 0.5)")
        if self.max_terms < 1:
            raise ValueError("max_terms must be >= 1")


DEFAULT_CONFIG = SeriesConfig()
