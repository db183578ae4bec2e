"""Project endpoints, including the public like button and gallery management."""

from uuid import UUID

from litestar import Controller, Request, delete, get, patch, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import project_service
from folio.lib.client_ip import get_client_ip, hash_client_ip
from folio.schemas import serialize, serialize_many
from folio.schemas.common import SUCCESS, ImageIdsRequest, ImageUrlRequest, ReorderRequest
from folio.schemas.projects import (
    CreateProjectRequest,
    ProjectImageResponse,
    ProjectResponse,
    UpdateProjectRequest,
)


class ProjectController(Controller):
    path = "/projects"
    tags = ["projects"]

    # -- public --

    @get("/")
    async def list_projects(self, db_session: AsyncSession, visible: bool = False) -> list[dict]:
        projects = await project_service.list_projects(db_session, visible_only=visible)
        return serialize_many(ProjectResponse, projects)

    @get("/visible")
    async def list_visible_projects(self, db_session: AsyncSession) -> list[dict]:
        projects = await project_service.list_projects(db_session, visible_only=True)
        return serialize_many(ProjectResponse, projects)

    @get("/slug/{slug:str}")
    async def get_project_by_slug(self, db_session: AsyncSession, slug: str) -> dict:
        return serialize(ProjectResponse, await project_service.get_project_by_slug(db_session, slug))

    @get("/{project_id:uuid}")
    async def get_project(self, db_session: AsyncSession, project_id: UUID) -> dict:
        return serialize(ProjectResponse, await project_service.get_project(db_session, project_id))

    @post("/{project_id:uuid}/like")
    async def like_project(self, request: Request, db_session: AsyncSession, project_id: UUID) -> dict:
        """One like per visitor; the visitor is identified by a hash of their IP."""
        ip_hash = hash_client_ip(get_client_ip(request.scope))
        likes_count = await project_service.like_project(db_session, project_id, ip_hash)
        return {"success": True, "likesCount": likes_count}

    # -- admin --

    @post("/", guards=[admin_guard])
    async def create_project(self, db_session: AsyncSession, data: CreateProjectRequest) -> dict:
        project = await project_service.create_project(db_session, data.changes())
        return serialize(ProjectResponse, project)

    @patch("/reorder", guards=[admin_guard])
    async def reorder_projects(self, db_session: AsyncSession, data: ReorderRequest) -> dict:
        await project_service.reorder_projects(db_session, data.ids)
        return SUCCESS

    @put("/{project_id:uuid}", guards=[admin_guard])
    async def update_project(
        self, db_session: AsyncSession, project_id: UUID, data: UpdateProjectRequest
    ) -> dict:
        project = await project_service.update_project(db_session, project_id, data.changes())
        return serialize(ProjectResponse, project)

    @patch("/{project_id:uuid}/visibility", guards=[admin_guard])
    async def toggle_visibility(self, db_session: AsyncSession, project_id: UUID) -> dict:
        project = await project_service.toggle_project_visibility(db_session, project_id)
        return serialize(ProjectResponse, project)

    @delete("/{project_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_project(self, db_session: AsyncSession, project_id: UUID) -> dict:
        await project_service.delete_project(db_session, project_id)
        return SUCCESS

    @post("/{project_id:uuid}/gallery", guards=[admin_guard])
    async def add_gallery_image(
        self, db_session: AsyncSession, project_id: UUID, data: ImageUrlRequest
    ) -> dict:
        image = await project_service.add_gallery_image(db_session, project_id, data.url)
        return serialize(ProjectImageResponse, image)

    @delete("/{project_id:uuid}/gallery", guards=[admin_guard], status_code=HTTP_200_OK)
    async def remove_gallery_images(
        self, db_session: AsyncSession, project_id: UUID, data: ImageIdsRequest
    ) -> dict:
        await project_service.remove_gallery_images(db_session, project_id, data.image_ids)
        return SUCCESS
