"""Request gate DI provider."""

from dishka import Scope, provide
from fastapi import Request

from quill.domain.model import AuthenticatedUser
from quill.domain.service import AuthService, JWTService
from quill.interface.api.gate import authenticate_request
from quill.util.di.base import ProviderBase


class ProdGateProvider(ProviderBase):
    """Resolves the caller's identity once per request.

    Only routes that depend on ``AuthenticatedUser`` trigger it.
    """

    @provide(scope=Scope.REQUEST)
    async def get_authenticated_user(
        self,
        request: Request,
        jwt_service: JWTService,
        auth_service: AuthService,
    ) -> AuthenticatedUser:
        """Provide the authenticated user for the current request."""
        return await authenticate_request(request, jwt_service, auth_service)
