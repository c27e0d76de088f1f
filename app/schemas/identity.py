"""Pydantic schemas for identity outcomes."""
from typing import Literal

from pydantic import BaseModel


class Authenticated(BaseModel):
    kind: Literal["authenticated"] = "authenticated"
    user_id: int
    created: bool = False  # True when this call registered the user


class Rejected(BaseModel):
    kind: Literal["rejected"] = "rejected"
    reason: str


class MeOutSchema(BaseModel):
    user_id: int | None = None
