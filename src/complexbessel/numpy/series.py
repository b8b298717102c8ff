"""Power series summation for the Bessel functions

Every series evaluated here has the shape

    sum_k s^k (x/2)^(n + 2k) / (k! * Gamma(n + k + 1))

with s = -1 for J and s = +1 for I. The terms come from a generator, and a
single routine decides when to stop summing them.
"""

import logging
import warnings
from collections.abc import Iterable, Iterator
from itertools import islice

import numpy as np

from complexbessel.config import DEFAULT_CONFIG, SeriesConfig

logger = logging.getLogger(__name__)


class SeriesConvergenceWarning(RuntimeWarning):
    """Emitted when a series reaches the term cap before converging"""


def bessel_terms(
    x2: np.complex128, order, first_denominator: float, alternating: bool
) -> Iterator[np.complex128]:
    """Generate the terms of the Bessel power series

    The denominators are carried as running products rather than recomputed:
    d1 tracks k! and d2 tracks Gamma(n + k + 1) via d2 *= n + k.

    Args:
        x2: Half the argument, x / 2
        order: Series order n. An int keeps the powers of x2 integral.
        first_denominator: Gamma(n + 1), i.e. n! for integer n
        alternating: Flip the sign of every other term (J) or not (I)
    """
    k = 0
    sign = 1.0
    d1 = 1.0
    d2 = first_denominator
    while True:
        yield sign * x2 ** (order + 2 * k) / (d1 * d2)
        k += 1
        if alternating:
            sign = -sign
        d1 *= k
        d2 *= order + k


def converge(
    terms: Iterable[np.complex128], config: SeriesConfig = DEFAULT_CONFIG
) -> np.complex128:
    """Sum a series until the newest term stops mattering

    Summation stops once |term / sum| < config.tolerance. If the very first
    term is already smaller than the tolerance the series is taken to be
    zero, which covers arguments at the origin with a nonzero order.

    If config.max_terms terms have been summed without meeting the stopping
    rule, a SeriesConvergenceWarning is emitted and the partial sum returned.
    """
    result = np.complex128(0.0)
    for nterms, term in enumerate(islice(terms, config.max_terms), start=1):
        if nterms == 1 and abs(term) < config.tolerance:
            return result
        result += term
        if abs(term / result) < config.tolerance:
            logger.debug(f"Series converged after {nterms} terms")
            return result
    warnings.warn(
        f"Series did not converge within {config.max_terms} terms (last sum {result})",
        SeriesConvergenceWarning,
        stacklevel=2,
    )
    return result
