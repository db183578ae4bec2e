from folio.schemas.base import ResponseSchema
from folio.schemas.messages import MessageResponse


class DashboardStatsResponse(ResponseSchema):
    total_clients: int
    visible_clients: int
    total_messages: int
    unread_messages: int
    skills: int
    experiences: int
    recent_messages: list[MessageResponse]
