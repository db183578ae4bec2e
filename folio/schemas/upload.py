from folio.schemas.base import ResponseSchema


class UploadResponse(ResponseSchema):
    key: str
    url: str
