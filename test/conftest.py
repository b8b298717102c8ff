import os
from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def artifacts_dir(request: pytest.FixtureRequest) -> Path:
    """Directory for diagnostic plots.

    One subdirectory of ./test_artifacts per test module, mirroring the layout
    under test/.
    """
    testpath = str(request.path.relative_to(Path(__file__).parent))
    out = Path(os.getcwd()) / "test_artifacts" / testpath.removesuffix(".py")
    out.mkdir(parents=True, exist_ok=True)
    return out


@pytest.fixture
def complex_points() -> np.ndarray:
    """Moderate-size arguments away from the negative real axis (branch cut)"""
    rng = np.random.default_rng(1234)
    radius = rng.uniform(0.2, 4.0, size=40)
    phase = rng.uniform(-0.8 * np.pi, 0.8 * np.pi, size=40)
    return radius * np.exp(1j * phase)
