"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked store, fake gRPC context,
                    TestClient, in-process gRPC server)
    - unit/       : Unit tests (pure functions, in-memory store)
"""
import os
import sys

import pytest

# Set testing environment BEFORE any project imports
os.environ.setdefault("ENV", "testing")

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from core.metrics import GatewayMetrics
from microservices.eventmaster_service.event_store import InMemoryEventStore
from tests.fixtures import make_seeded_store


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def metrics():
    """Fresh metrics registry, isolated from every other test"""
    return GatewayMetrics()


@pytest.fixture
def memory_store():
    """Empty in-memory event store"""
    return InMemoryEventStore()


@pytest.fixture
def seeded_store():
    """In-memory store with two DCs, two topics and three events"""
    return make_seeded_store()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "golden: Characterization tests")
