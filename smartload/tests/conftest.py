# smartload/tests/conftest.py
import json
from pathlib import Path
import pytest
from fastapi.testclient import TestClient

from smartload.app import app
from smartload.models import Truck
from smartload.tests.factories import make_order

# Base directories
ROOT = Path(__file__).resolve().parents[2]        # repository root
EXAMPLES_DIR = ROOT / "examples"


@pytest.fixture(scope="session")
def client():
    # server exceptions come back as HTTP 500 instead of raising in the test
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture(scope="session")
def payloads():
    """Request bodies shared by the HTTP tests."""
    path = EXAMPLES_DIR / "payloads.json"
    if not path.exists():
        raise FileNotFoundError(f"{path} not found.")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def truck():
    return Truck(id="truck-123", max_weight=44000, max_volume=3000)


@pytest.fixture
def scenario_a_orders():
    return [
        make_order("O1", payout=250000, weight=18000, volume=1200),
        make_order("O2", payout=180000, weight=12000, volume=900),
    ]


@pytest.fixture
def tradeoff_truck():
    return Truck(id="truck-tradeoff", max_weight=100, max_volume=100)


@pytest.fixture
def tradeoff_orders():
    """
    Three same-route orders on a 100/100 truck; any two fit, all three don't.
      X+Z: most payout (4500), half full
      X+Y: 4000, 90% full
      Y+Z: 2500, 100% full
    """
    return [
        make_order("X", payout=3000, weight=20, volume=20),
        make_order("Y", payout=1000, weight=70, volume=70),
        make_order("Z", payout=1500, weight=30, volume=30),
    ]
