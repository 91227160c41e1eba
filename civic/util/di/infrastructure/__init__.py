"""Infrastructure providers."""

# Import bases
from .geolocation import GeolocationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .geolocation import ProdGeolocationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GeolocationProvider",
    "PersistenceProvider",
    "ProdGeolocationProvider",
    "ProdPersistenceProvider",
]
