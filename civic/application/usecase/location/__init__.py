"""Location use cases."""

from .check_location import CheckLocationRequest, CheckLocationUseCase

__all__ = ["CheckLocationRequest", "CheckLocationUseCase"]
