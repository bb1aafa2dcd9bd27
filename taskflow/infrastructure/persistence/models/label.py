"""Label ORM model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.infrastructure.persistence.database import Base
from taskflow.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class Label(CuidMixin, TimestampMixin, SoftDeleteMixin, Base):
    """Label. Table: label. color is a free-form hex string."""

    __tablename__ = "label"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)
