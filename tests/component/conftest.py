"""
Component Test Layer Configuration

Structure:
    tests/component/
    └── golden/      Front ends exercised against mocked or in-memory stores

Usage:
    pytest tests/component -v
    pytest tests/component/golden -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.config import GatewayConfig


@pytest.fixture
def http_only_config():
    """Gateway config with the gRPC front end disabled"""
    return GatewayConfig(grpc_enabled=False)
