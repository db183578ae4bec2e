from datetime import datetime
from uuid import UUID

from pydantic import Field

from folio.schemas.base import RequestSchema, ResponseSchema
from folio.schemas.common import RecordSchema


class CreateProjectRequest(RequestSchema):
    title: str = Field(min_length=1, max_length=500)
    client_id: UUID | None = None
    project_date: datetime
    summary: str
    problem: str | None = None
    solution: str | None = None
    result: str | None = None
    thumbnail_url: str = Field(min_length=1)
    video_url: str | None = None
    is_visible: bool = True
    category_id: UUID | None = None


class UpdateProjectRequest(RequestSchema):
    clearable = frozenset(
        {"client_id", "category_id", "problem", "solution", "result", "video_url"}
    )

    title: str | None = Field(default=None, min_length=1, max_length=500)
    client_id: UUID | None = None
    project_date: datetime | None = None
    summary: str | None = None
    problem: str | None = None
    solution: str | None = None
    result: str | None = None
    thumbnail_url: str | None = Field(default=None, min_length=1)
    video_url: str | None = None
    is_visible: bool | None = None
    category_id: UUID | None = None


class ProjectCategorySummary(ResponseSchema):
    id: UUID
    name: str
    slug: str


class ProjectClientSummary(ResponseSchema):
    id: UUID
    name: str
    slug: str
    logo_url: str | None


class ProjectImageResponse(RecordSchema):
    project_id: UUID
    url: str


class ProjectResponse(RecordSchema):
    title: str
    slug: str
    project_date: datetime
    summary: str
    problem: str | None
    solution: str | None
    result: str | None
    thumbnail_url: str
    video_url: str | None
    is_visible: bool
    likes_count: int
    order: int
    client_id: UUID | None
    category_id: UUID | None
    client: ProjectClientSummary | None = None
    category: ProjectCategorySummary | None = None
    gallery: list[ProjectImageResponse] = []
