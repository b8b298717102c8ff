"""Bessel functions of complex argument and real order, by power series

The numpy-backed functions are re-exported here:

``j``, ``jf``
    First kind, integer and real order
``y``
    Second kind
``i``, ``k``
    Modified first and second kind
``hankel_first``, ``hankel_second``
    Hankel functions H1 = J + iY and H2 = J - iY

A traceable JAX version lives in :mod:`complexbessel.jax.bessel`.
"""

from complexbessel.config import DEFAULT_CONFIG, SeriesConfig
from complexbessel.numpy.bessel import hankel_first, hankel_second, i, j, jf, k, y
from complexbessel.numpy.series import SeriesConvergenceWarning

__all__ = [
    "DEFAULT_CONFIG",
    "SeriesConfig",
    "SeriesConvergenceWarning",
    "hankel_first",
    "hankel_second",
    "i",
    "j",
    "jf",
    "k",
    "y",
]
