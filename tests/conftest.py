import os
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Import the local `src` copy when running from the repo.
# If the package is installed editable (`pip install -e .`) this is a no-op.
SRC = Path(__file__).resolve().parents[1] / "src"
if SRC.exists() and str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings isolated from the environment, writing into a temp data dir."""
    from plantgen.config import PlantGenSettings

    for name in list(os.environ):
        if name.startswith("PLANTGEN_"):
            monkeypatch.delenv(name)
    return PlantGenSettings(data_dir=tmp_path / "__data__")
