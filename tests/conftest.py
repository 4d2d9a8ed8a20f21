"""Global test configuration and fixtures."""
import os

import pytest

# Test environment configuration
os.environ.setdefault('METRICS_ENABLED', 'false')
os.environ.setdefault('ORCHESTRATOR_API_VERSION', '1')

from tests.test_utils import RecordingEventSink, create_tiered_backend  # noqa: E402


@pytest.fixture
def event_sink():
    """Collect events emitted by the code under test."""
    return RecordingEventSink()


@pytest.fixture
def backend_a():
    """Online backend A with pools p1 (tier=fast) and p2 (tier=slow)."""
    return create_tiered_backend("A")
