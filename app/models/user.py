"""
app/models/user.py

Purpose: User document and session identity models

- UserRecord: a document of the users collection (telegramId, isAdmin, createdAt, ...)
- SessionUser: claims carried by the signed session cookie
- Mongo documents -> JSON-safe dicts
"""

from datetime import datetime
from typing import Optional, Any

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.time_utils import iso_timestamp


class UserRecord(BaseModel):
    """
    A user of the trading mini app.

    Only the fields this service reasons about are declared; any other
    profile field stored on the document is kept as an extra.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    telegramId: int
    isAdmin: bool = False
    createdAt: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        if v is None:
            return v
        return str(v)

    @field_validator("isAdmin", mode="before")
    @classmethod
    def missing_flag_is_false(cls, v):
        return bool(v) if v is not None else False


class SessionUser(BaseModel):
    """
    Identity resolved from the session token.

    `id` is the caller's Telegram id, i.e. the `telegramId` of their user record.
    """
    model_config = ConfigDict(extra="allow")

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    exchange: Optional[str] = None
    exchangeConnected: bool = False
    riskLevel: Optional[str] = None


def serialize_document(value: Any) -> Any:
    """
    Converts BSON-only values so the document can go through FastAPI's JSON encoder.

    Datetimes (stored naive, in UTC) become ISO strings with millisecond
    precision and a Z suffix.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return iso_timestamp(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value
