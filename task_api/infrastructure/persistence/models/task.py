"""Task ORM model. One row per created task."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from task_api.core.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from task_api.domain.enums import TaskStatus
from task_api.infrastructure.persistence.database import Base
from task_api.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntegerIdMixin,
)


class Task(IntegerIdMixin, CreatedAtMixin, Base):
    """Task created via POST /tasks. Table: task."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True
    )
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=TaskStatus.PENDING.value,
        server_default=TaskStatus.PENDING.value,
    )
    due_date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
