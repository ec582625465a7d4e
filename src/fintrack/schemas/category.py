"""Category and keyword rule schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID | None = Field(description="Owner; null for default categories")
    name: str
    description: str | None
    is_default: bool
    created_at: datetime


class KeywordRuleCreate(BaseModel):
    keyword: str = Field(..., min_length=1, max_length=255)
    category_id: UUID


class KeywordRuleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    keyword: str
    category_id: UUID
    position: int = Field(description="Evaluation order; lower positions match first")
    created_at: datetime
    updated_at: datetime
