"""Get identity use case."""

from pydantic import BaseModel

from civic.domain.service import IdentityService


class GetIdentityRequest(BaseModel):
    """Get identity request."""

    user_token: str | None = None  # Cookie value, possibly missing or malformed


class GetIdentityResponse(BaseModel):
    """Caller's user token."""

    user_token: str
    minted: bool


class GetIdentityUseCase:
    """Use case for resolving (and minting if needed) the caller's token."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(self, request: GetIdentityRequest) -> GetIdentityResponse:
        """Execute get identity flow."""
        token, minted = self.identity_service.resolve_user_token(request.user_token)
        return GetIdentityResponse(user_token=token.root, minted=minted)
