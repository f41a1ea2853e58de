import sys
from pathlib import Path

import pytest

# Run against the source tree without installing the package
ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT / "src", ROOT / "tests"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture
def sample():
    from tradereport.reporting import sample_instructions

    return sample_instructions()
