"""Mock providers for testing."""

from .geolocation import MockGeolocationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGeolocationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
