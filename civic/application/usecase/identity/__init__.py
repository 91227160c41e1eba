"""Identity use cases."""

from .get_identity import GetIdentityRequest, GetIdentityResponse, GetIdentityUseCase

__all__ = ["GetIdentityRequest", "GetIdentityResponse", "GetIdentityUseCase"]
