"""Revenue ORM — monthly revenue reference data, read-only to this system."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Revenue(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(16), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)
