def pytest_ignore_collect(collection_path, config):
    """Only collect the JAX backend tests when jax and jaxtyping are installed."""
    try:
        import jax  # noqa: F401
        import jaxtyping  # noqa: F401
    except ImportError:
        return True
    return None
