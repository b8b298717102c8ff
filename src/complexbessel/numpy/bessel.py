"""Bessel functions of complex argument and real order

J and I are summed directly from their power series. Y and K are built from
J and I with the reflection formulas, which are singular at integer orders;
there the limit is approximated by averaging the formula at n +- limit_offset.
The Hankel functions are combinations of J and Y.

No asymptotic expansion is used, so accuracy degrades for large |x| where
the alternating series cancels badly.
"""

import logging

import numpy as np
from scipy.special import factorial, gamma

from complexbessel.config import DEFAULT_CONFIG, SeriesConfig
from complexbessel.numpy.series import bessel_terms, converge

logger = logging.getLogger(__name__)


def _is_integer(n) -> bool:
    return float(n).is_integer()


def j(x, n: int, *, config: SeriesConfig = DEFAULT_CONFIG) -> np.complex128:
    """Bessel function of the first kind, integer order

    Faster than jf since the powers of x/2 stay integral and the denominators
    are plain factorials. Negative orders use J_{-n}(x) = (-1)^n J_n(x).

    Args:
        x: Argument, anything convertible to a complex number
        n: Integer order
    """
    p = abs(n)
    x2 = np.complex128(x) / 2.0
    res = converge(
        bessel_terms(x2, p, factorial(p), alternating=True),
        config,
    )
    if n < 0:
        return (-1.0) ** p * res
    return res


def jf(x, n: float, *, config: SeriesConfig = DEFAULT_CONFIG) -> np.complex128:
    """Bessel function of the first kind, real order

    Whole orders are handed to j, which avoids accumulating gamma function
    error at integer arguments. Both paths agree to within the series
    tolerance.
    """
    if _is_integer(n):
        return j(x, int(n), config=config)
    x2 = np.complex128(x) / 2.0
    return converge(
        bessel_terms(x2, float(n), gamma(n + 1.0), alternating=True),
        config,
    )


def _y_reflection(x, n: float, config: SeriesConfig) -> np.complex128:
    npi = n * np.pi
    jn = jf(x, n, config=config)
    jmn = jf(x, -n, config=config)
    return (np.cos(npi) * jn - jmn) / np.sin(npi)


def y(x, n: float, *, config: SeriesConfig = DEFAULT_CONFIG) -> np.complex128:
    """Bessel function of the second kind, real order

    Y_n = (cos(n pi) J_n - J_{-n}) / sin(n pi) for non-integer n. At integer n
    the mean of that formula at n +- config.limit_offset is returned instead,
    good to roughly 1e-5 with the default offset.
    """
    if _is_integer(n):
        offset = config.limit_offset
        logger.debug(f"Taking Y limit at order {n} from {n - offset} and {n + offset}")
        # one level only: the shifted orders go straight to the reflection formula
        return (
            _y_reflection(x, n + offset, config) + _y_reflection(x, n - offset, config)
        ) / 2.0
    return _y_reflection(x, n, config)


def i(x, n: float, *, config: SeriesConfig = DEFAULT_CONFIG) -> np.complex128:
    """Modified Bessel function of the first kind, real order

    Same series as J without the alternating sign. Gamma(n + 1) has a pole at
    negative integer n, so those orders use I_{-n}(x) = I_n(x).
    """
    if _is_integer(n) and n < 0:
        n = -n
    x2 = np.complex128(x) / 2.0
    return converge(
        bessel_terms(x2, float(n), gamma(n + 1.0), alternating=False),
        config,
    )


def _k_reflection(x, n: float, config: SeriesConfig) -> np.complex128:
    return (np.pi / 2 / np.sin(n * np.pi)) * (
        i(x, -n, config=config) - i(x, n, config=config)
    )


def k(x, n: float, *, config: SeriesConfig = DEFAULT_CONFIG) -> np.complex128:
    """Modified Bessel function of the second kind, real order

    K_n = pi / 2 (I_{-n} - I_n) / sin(n pi), with the same integer order limit
    as y.
    """
    if _is_integer(n):
        offset = config.limit_offset
        logger.debug(f"Taking K limit at order {n} from {n - offset} and {n + offset}")
        return (
            _k_reflection(x, n + offset, config) + _k_reflection(x, n - offset, config)
        ) / 2.0
    return _k_reflection(x, n, config)


def hankel_first(
    x, n: float, *, config: SeriesConfig = DEFAULT_CONFIG
) -> np.complex128:
    """Hankel function of the first kind, H1_n = J_n + i Y_n"""
    return jf(x, n, config=config) + 1j * y(x, n, config=config)


def hankel_second(
    x, n: float, *, config: SeriesConfig = DEFAULT_CONFIG
) -> np.complex128:
    """Hankel function of the second kind, H2_n = J_n - i Y_n"""
    return jf(x, n, config=config) - 1j * y(x, n, config=config)
