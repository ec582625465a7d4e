"""Global keyword -> category rules used for auto-categorization.

Rules are not scoped per user. ``position`` fixes the order in which rules
are evaluated; the first matching rule wins.
"""
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.models.base import BaseModel


class KeywordRule(BaseModel):
    __tablename__ = "keyword_rules"

    keyword: Mapped[str] = mapped_column(String(255), nullable=False)
    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<KeywordRule(position={self.position}, keyword={self.keyword}, category_id={self.category_id})>"
