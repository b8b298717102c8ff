"""Bessel functions for JAX

JAX only has jax.scipy.special.bessel_jn, which is limited to integer order
and real argument. These are the same power series as
complexbessel.numpy.bessel, written without Python branching on the order
so that they trace under jax.jit and jax.vmap.

Argument order follows scipy.special: order first, then argument.

Differences from the numpy backend:
- integer and non-integer orders share the gamma series; integer orders are
  evaluated at |v| and reflected, so there is no factorial fast path
- reaching config.max_terms silently returns the partial sum
- yv and kv evaluate the reflection formula twice even at non-integer order
"""

from typing import TypeAlias

import jax.numpy as jnp
from jax import lax

from complexbessel.config import DEFAULT_CONFIG, SeriesConfig
from complexbessel.jax.types import SComplex, SFloat

_SeriesState: TypeAlias = tuple[SFloat, SFloat, SFloat, SFloat, SComplex, SComplex]
"""k, sign, d1, d2, term, result"""


def gamma(a: SFloat) -> SFloat:
    """Real gamma function, valid for negative non-integer a too

    lax.lgamma only gives log|Gamma(a)|. The sign is negative on
    (-1, 0), (-3, -2), (-5, -4), ...
    """
    a = jnp.asarray(a, dtype=float)
    sign = jnp.where((a > 0) | (jnp.floor(a) % 2 == 0), 1.0, -1.0)
    return sign * jnp.exp(lax.lgamma(a))


def _power(z2: SComplex, a: SFloat) -> SComplex:
    """Principal branch z2**a, with the limit taken at z2 == 0"""
    at_zero = jnp.where(a > 0, 0.0, jnp.where(a == 0, 1.0, jnp.inf))
    safe = jnp.where(z2 == 0, 1.0, z2)
    return jnp.where(z2 == 0, at_zero, jnp.power(safe, a))


def _series(
    z: SComplex, v: SFloat, alternating: bool, config: SeriesConfig
) -> SComplex:
    """sum_k s^k (z/2)^(v + 2k) / (k! Gamma(v + k + 1)), s = -1 if alternating"""
    z2 = jnp.asarray(z, dtype=complex) / 2
    flip = -1.0 if alternating else 1.0
    d2 = gamma(v + 1)
    term0 = _power(z2, v) / d2

    def cond_fun(state: _SeriesState):
        k, _, _, _, term, result = state
        return (jnp.abs(term / result) >= config.tolerance) & (k < config.max_terms)

    def body_fun(state: _SeriesState) -> _SeriesState:
        k, sign, d1, d2, _, result = state
        k_new = k + 1
        sign_new = sign * flip
        d1_new = d1 * k_new
        d2_new = d2 * (v + k_new)
        term_new = sign_new * _power(z2, v + 2 * k_new) / (d1_new * d2_new)
        return k_new, sign_new, d1_new, d2_new, term_new, result + term_new

    one = jnp.ones((), dtype=float)
    _, _, _, _, _, result = lax.while_loop(
        cond_fun, body_fun, (0 * one, one, one, d2, term0, term0)
    )
    return jnp.where(jnp.abs(term0) < config.tolerance, 0.0j, result)


def _is_integer(v: SFloat):
    return v == jnp.round(v)


def jv(v: SFloat, z: SComplex, *, config: SeriesConfig = DEFAULT_CONFIG) -> SComplex:
    """Bessel function of the first kind

    Integer orders use J_{-n}(z) = (-1)^n J_n(z), since Gamma(v + 1) has a pole
    at negative integers.
    """
    v = jnp.asarray(v, dtype=float)
    is_int = _is_integer(v)
    res = _series(z, jnp.where(is_int, jnp.abs(v), v), True, config)
    odd_negative = is_int & (v < 0) & (jnp.abs(v) % 2 == 1)
    return jnp.where(odd_negative, -res, res)


def iv(v: SFloat, z: SComplex, *, config: SeriesConfig = DEFAULT_CONFIG) -> SComplex:
    """Modified Bessel function of the first kind

    Integer orders use I_{-n}(z) = I_n(z).
    """
    v = jnp.asarray(v, dtype=float)
    return _series(z, jnp.where(_is_integer(v), jnp.abs(v), v), False, config)


def _limit_shift(v: SFloat, config: SeriesConfig) -> SFloat:
    """Order offset for the reflection formulas: zero unless v is an integer"""
    return jnp.where(_is_integer(v), config.limit_offset, 0.0)


def _y_reflection(v: SFloat, z: SComplex, config: SeriesConfig) -> SComplex:
    vpi = v * jnp.pi
    return (
        jnp.cos(vpi) * jv(v, z, config=config) - jv(-v, z, config=config)
    ) / jnp.sin(vpi)


def yv(v: SFloat, z: SComplex, *, config: SeriesConfig = DEFAULT_CONFIG) -> SComplex:
    """Bessel function of the second kind

    Mean of the reflection formula at v +- shift, where shift is
    config.limit_offset at integer v and zero otherwise.
    """
    v = jnp.asarray(v, dtype=float)
    shift = _limit_shift(v, config)
    above = _y_reflection(v + shift, z, config)
    below = _y_reflection(v - shift, z, config)
    return (above + below) / 2


def _k_reflection(v: SFloat, z: SComplex, config: SeriesConfig) -> SComplex:
    return (jnp.pi / 2 / jnp.sin(v * jnp.pi)) * (
        iv(-v, z, config=config) - iv(v, z, config=config)
    )


def kv(v: SFloat, z: SComplex, *, config: SeriesConfig = DEFAULT_CONFIG) -> SComplex:
    """Modified Bessel function of the second kind, same limit scheme as yv"""
    v = jnp.asarray(v, dtype=float)
    shift = _limit_shift(v, config)
    above = _k_reflection(v + shift, z, config)
    below = _k_reflection(v - shift, z, config)
    return (above + below) / 2


def hankel1(
    v: SFloat, z: SComplex, *, config: SeriesConfig = DEFAULT_CONFIG
) -> SComplex:
    """Hankel function of the first kind, J + iY"""
    return jv(v, z, config=config) + 1j * yv(v, z, config=config)


def hankel2(
    v: SFloat, z: SComplex, *, config: SeriesConfig = DEFAULT_CONFIG
) -> SComplex:
    """Hankel function of the second kind, J - iY"""
    return jv(v, z, config=config) - 1j * yv(v, z, config=config)
