"""Owner profile and education endpoints."""

from uuid import UUID

from litestar import Controller, Response, delete, get, post, put
from litestar.enums import MediaType
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import profile_service
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS
from folio.schemas.profile import (
    CreateEducationRequest,
    EducationResponse,
    ProfileResponse,
    UpdateEducationRequest,
    UpdateProfileRequest,
)


class ProfileController(Controller):
    path = "/profile"
    tags = ["profile"]

    @get("/")
    async def get_profile(self, db_session: AsyncSession) -> Response:
        profile = await profile_service.get_profile(db_session)
        if profile is None:
            return Response(content=b"null", media_type=MediaType.JSON)
        return Response(content=serialize(ProfileResponse, profile), media_type=MediaType.JSON)

    @put("/", guards=[admin_guard])
    async def update_profile(self, db_session: AsyncSession, data: UpdateProfileRequest) -> dict:
        profile = await profile_service.upsert_profile(db_session, data.changes())
        return serialize(ProfileResponse, profile)

    @get("/educations")
    async def list_educations(self, db_session: AsyncSession) -> list[dict]:
        return serialize_many(EducationResponse, await profile_service.list_educations(db_session))

    @post("/educations", guards=[admin_guard])
    async def create_education(self, db_session: AsyncSession, data: CreateEducationRequest) -> dict:
        education = await profile_service.create_education(db_session, data.changes())
        return serialize(EducationResponse, education)

    @put("/educations/{education_id:uuid}", guards=[admin_guard])
    async def update_education(
        self, db_session: AsyncSession, education_id: UUID, data: UpdateEducationRequest
    ) -> dict:
        education = await profile_service.update_education(db_session, education_id, data.changes())
        return serialize(EducationResponse, education)

    @delete("/educations/{education_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_education(self, db_session: AsyncSession, education_id: UUID) -> dict:
        await profile_service.delete_education(db_session, education_id)
        return SUCCESS
