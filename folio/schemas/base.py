"""Base classes for request and response bodies.

The wire format is camelCase JSON while Python code uses snake_case. Request
bodies reject unknown fields; responses are built from ORM rows.
"""

from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    # Fields an update may explicitly set to null
    clearable: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, Any]:
        """Supplied fields only, in snake_case, ready to copy onto a row.

        An explicit ``null`` is kept only for fields listed in ``clearable``.
        """
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None or name in self.clearable
        }


class ResponseSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def serialize(schema: type[ResponseSchema], obj: Any) -> dict[str, Any]:
    """Render an ORM row (or mapping) as a camelCase JSON-ready dict."""
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)


def serialize_many(schema: type[ResponseSchema], objs: Iterable[Any]) -> list[dict[str, Any]]:
    return [serialize(schema, obj) for obj in objs]
