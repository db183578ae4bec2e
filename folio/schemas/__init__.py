from folio.schemas.base import RequestSchema, ResponseSchema, serialize, serialize_many

__all__ = ["RequestSchema", "ResponseSchema", "serialize", "serialize_many"]
