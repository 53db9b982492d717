from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class User(BaseModel):
    """A managed user record, addressed by its integer ``id``."""

    id: Optional[int] = Field(default=None, description="User id; assigned by the store when omitted")
    username: str
    email: str
    full_name: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = Field(default=None, description="Set by the store on creation")
    updated_at: Optional[datetime] = Field(default=None, description="Set by the store on every write")

    class Config:
        from_attributes = True
