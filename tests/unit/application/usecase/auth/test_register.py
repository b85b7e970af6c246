"""Unit tests for RegisterUseCase."""

import pytest
from pydantic import ValidationError

from quill.application.usecase.auth.register import RegisterRequest, RegisterUseCase
from quill.domain.error import ConflictError
from quill.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_public_user_and_token(self, unit_env):
        """New account comes back without a hash and with a usable token."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)
        request = RegisterRequest(name="Ana", email="ana@x.com", password="secret1")

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.user.model_dump() == {
            "id": 1,
            "name": "Ana",
            "email": "ana@x.com",
        }
        payload = jwt_service.verify_token(response.token)
        assert payload.sub == "1"
        assert payload.email == "ana@x.com"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(
            RegisterRequest(name="Ana", email="ana@x.com", password="secret1")
        )

        with pytest.raises(ConflictError):
            await use_case.execute(
                RegisterRequest(name="Imposter", email="ana@x.com", password="secret2")
            )

    @pytest.mark.parametrize(
        "fields",
        [
            {"name": "", "email": "ana@x.com", "password": "secret1"},
            {"name": "x" * 101, "email": "ana@x.com", "password": "secret1"},
            {"name": "Ana", "email": "not-an-email", "password": "secret1"},
            {"name": "Ana", "email": "ana@x.com", "password": "short"},
        ],
    )
    def test_invalid_input_rejected(self, fields):
        with pytest.raises(ValidationError):
            RegisterRequest(**fields)
