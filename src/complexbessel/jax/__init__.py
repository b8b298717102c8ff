"""Traceable JAX versions of the Bessel series

Importing this package switches JAX to double precision, since the series
tolerance is far below single precision epsilon.
"""
import jax

jax.config.update("jax_enable_x64", True)
