"""Type aliases for the JAX backend"""

from jax import Array
from jaxtyping import Complex, Float

SFloat = Float[Array, ""] | float
"""Scalar (double-precision) floating point"""
SComplex = Complex[Array, ""] | complex
"""Scalar (double-precision) complex number"""
