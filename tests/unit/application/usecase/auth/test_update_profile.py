"""Unit tests for GetProfileUseCase and UpdateProfileUseCase."""

import pytest

from quill.application.usecase.auth.get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
)
from quill.application.usecase.auth.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from quill.domain.error import ConflictError
from quill.domain.service import AuthService
from tests.conftest import make_email, make_password
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetProfileUseCase:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_returns_public_fields(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        use_case = await unit_env.get(GetProfileUseCase)
        user = await auth_service.register("Ana", make_email(), make_password())

        response = await use_case.execute(GetProfileRequest(identity=user))

        assert response.model_dump() == {
            "user": {"id": user.id, "name": "Ana", "email": "ana@x.com"}
        }


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        """Only the supplied fields change."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        use_case = await unit_env.get(UpdateProfileUseCase)
        user = await auth_service.register("Ana", make_email(), make_password())

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(user_id=user.id, email="ana.maria@x.com")
        )

        # Assert
        assert response.user.name == "Ana"
        assert response.user.email == "ana.maria@x.com"
        assert (await auth_service.authenticate(make_email("ana.maria"), "secret1")).id == user.id

    @pytest.mark.asyncio
    async def test_email_conflict(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        use_case = await unit_env.get(UpdateProfileUseCase)
        user = await auth_service.register("Ana", make_email("ana"), make_password())
        await auth_service.register("Bo", make_email("bo"), make_password())

        with pytest.raises(ConflictError):
            await use_case.execute(
                UpdateProfileRequest(user_id=user.id, email="bo@x.com")
            )
