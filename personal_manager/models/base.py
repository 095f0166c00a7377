from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated

from personal_manager.utils.dates import parse_flexible_datetime, to_naive_utc


def _serialize_utc(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


# Inbound datetimes are stored as naive UTC; outbound ones are rendered with a "Z" suffix
UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc), PlainSerializer(_serialize_utc, return_type=str, when_used="json")]
FlexibleDatetime = Annotated[
    Optional[datetime],
    BeforeValidator(parse_flexible_datetime),
    PlainSerializer(_serialize_utc, return_type=str, when_used="json-unless-none"),
]


class APIModel(BaseModel):
    """Accepts snake_case or camelCase on input, renders camelCase on output."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UpdateModel(APIModel):
    """Partial update payload: only fields the caller actually sent are applied."""

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


# ===== RESPONSE ENVELOPES =====

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    success: bool = True
    data: T


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str


class ListEnvelope(BaseModel, Generic[T]):
    success: bool = True
    data: List[T]


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
    details: Optional[list] = None
