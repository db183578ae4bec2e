"""Client, client category and category image endpoints."""

from uuid import UUID

from litestar import Controller, delete, get, patch, post, put
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from folio.auth.guards import admin_guard
from folio.db.services import client_service
from folio.schemas import serialize, serialize_many
from folio.schemas.clients import (
    CategoryImageResponse,
    ClientCategoryResponse,
    ClientCategoryWithClientResponse,
    ClientResponse,
    CreateClientCategoryRequest,
    CreateClientRequest,
    ReorderClientsRequest,
    UpdateClientCategoryRequest,
    UpdateClientRequest,
)
from folio.schemas.common import SUCCESS, ImageIdsRequest, ImageUrlRequest, ReorderRequest


class ClientController(Controller):
    path = "/clients"
    tags = ["clients"]

    # -- public --

    @get("/visible")
    async def list_visible_clients(self, db_session: AsyncSession) -> list[dict]:
        clients = await client_service.list_clients(db_session, visible_only=True)
        return serialize_many(ClientResponse, clients)

    @get("/slug/{slug:str}")
    async def get_client_by_slug(self, db_session: AsyncSession, slug: str) -> dict:
        return serialize(ClientResponse, await client_service.get_client_by_slug(db_session, slug))

    # -- clients (admin) --

    @get("/", guards=[admin_guard])
    async def list_clients(self, db_session: AsyncSession) -> list[dict]:
        return serialize_many(ClientResponse, await client_service.list_clients(db_session))

    @get("/categories", guards=[admin_guard])
    async def list_all_categories(self, db_session: AsyncSession) -> list[dict]:
        categories = await client_service.list_all_client_categories(db_session)
        return serialize_many(ClientCategoryWithClientResponse, categories)

    @get("/{client_id:uuid}", guards=[admin_guard])
    async def get_client(self, db_session: AsyncSession, client_id: UUID) -> dict:
        return serialize(ClientResponse, await client_service.get_client(db_session, client_id))

    @post("/", guards=[admin_guard])
    async def create_client(self, db_session: AsyncSession, data: CreateClientRequest) -> dict:
        client = await client_service.create_client(db_session, data.changes())
        return serialize(ClientResponse, client)

    @put("/{client_id:uuid}", guards=[admin_guard])
    async def update_client(
        self, db_session: AsyncSession, client_id: UUID, data: UpdateClientRequest
    ) -> dict:
        client = await client_service.update_client(db_session, client_id, data.changes())
        return serialize(ClientResponse, client)

    @delete("/{client_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_client(self, db_session: AsyncSession, client_id: UUID) -> dict:
        await client_service.delete_client(db_session, client_id)
        return SUCCESS

    @patch("/{client_id:uuid}/toggle-visibility", guards=[admin_guard])
    async def toggle_visibility(self, db_session: AsyncSession, client_id: UUID) -> dict:
        client = await client_service.toggle_client_visibility(db_session, client_id)
        return serialize(ClientResponse, client)

    @post("/reorder", guards=[admin_guard], status_code=HTTP_200_OK)
    async def reorder_clients(self, db_session: AsyncSession, data: ReorderClientsRequest) -> list[dict]:
        clients = await client_service.reorder_clients(db_session, data.ordered_ids)
        return serialize_many(ClientResponse, clients)

    # -- client categories (admin) --

    @get("/{client_id:uuid}/categories", guards=[admin_guard])
    async def list_client_categories(self, db_session: AsyncSession, client_id: UUID) -> list[dict]:
        categories = await client_service.list_client_categories(db_session, client_id)
        return serialize_many(ClientCategoryResponse, categories)

    @post("/{client_id:uuid}/categories", guards=[admin_guard])
    async def create_client_category(
        self, db_session: AsyncSession, client_id: UUID, data: CreateClientCategoryRequest
    ) -> dict:
        category = await client_service.create_client_category(
            db_session, client_id, data.name, data.slug
        )
        return serialize(ClientCategoryResponse, category)

    @patch("/{client_id:uuid}/categories/reorder", guards=[admin_guard])
    async def reorder_client_categories(
        self, db_session: AsyncSession, client_id: UUID, data: ReorderRequest
    ) -> dict:
        await client_service.reorder_client_categories(db_session, client_id, data.ids)
        return SUCCESS

    @put("/categories/{category_id:uuid}", guards=[admin_guard])
    async def update_client_category(
        self, db_session: AsyncSession, category_id: UUID, data: UpdateClientCategoryRequest
    ) -> dict:
        category = await client_service.update_client_category(
            db_session, category_id, data.name, data.slug
        )
        return serialize(ClientCategoryResponse, category)

    @delete("/categories/{category_id:uuid}", guards=[admin_guard], status_code=HTTP_200_OK)
    async def delete_client_category(self, db_session: AsyncSession, category_id: UUID) -> dict:
        await client_service.delete_client_category(db_session, category_id)
        return SUCCESS

    # -- category images (admin) --

    @post("/categories/{category_id:uuid}/images", guards=[admin_guard])
    async def add_category_image(
        self, db_session: AsyncSession, category_id: UUID, data: ImageUrlRequest
    ) -> dict:
        image = await client_service.add_category_image(db_session, category_id, data.url)
        return serialize(CategoryImageResponse, image)

    @delete("/categories/{category_id:uuid}/images", guards=[admin_guard], status_code=HTTP_200_OK)
    async def remove_category_images(
        self, db_session: AsyncSession, category_id: UUID, data: ImageIdsRequest
    ) -> dict:
        await client_service.remove_category_images(db_session, category_id, data.image_ids)
        return SUCCESS

    @patch("/categories/{category_id:uuid}/images/reorder", guards=[admin_guard])
    async def reorder_category_images(
        self, db_session: AsyncSession, category_id: UUID, data: ImageIdsRequest
    ) -> list[dict]:
        images = await client_service.reorder_category_images(db_session, category_id, data.image_ids)
        return serialize_many(CategoryImageResponse, images)
