"""Status ORM model. Workflow statuses a task may be in; managed elsewhere."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.infrastructure.persistence.database import Base
from taskflow.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class Status(CuidMixin, TimestampMixin, SoftDeleteMixin, Base):
    """Status. Table: status."""

    __tablename__ = "status"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
