# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Make "pom_grading" importable without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pom_grading.data.models.pom import MeasurementRecord  # noqa: E402

SAMPLE_POM_TEXT = "A - Front Length From Shoulder - 66\nB - ½ Chest - 54"


@pytest.fixture
def sample_pom_text() -> str:
    return SAMPLE_POM_TEXT


@pytest.fixture
def sample_records():
    return [
        MeasurementRecord("A", "Front Length From Shoulder", 66.0),
        MeasurementRecord("B", "½ Chest", 54.0),
    ]
