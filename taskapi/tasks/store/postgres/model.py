from datetime import datetime
from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

from taskapi.config import get_settings


settings = get_settings()

Base = declarative_base()


class TaskModel(Base):
    __tablename__ = settings.TASK_STORE_NAMESPACE

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    due_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )

    def __init__(
        self,
        id: str,
        title: str,
        description: str,
        status: str,
        due_date: datetime,
    ):
        self.id = id
        self.title = title
        self.description = description
        self.status = status
        self.due_date = due_date
