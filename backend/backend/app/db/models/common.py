from datetime import datetime, timezone
from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

class HasIntId:
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

class HasCreatedAt:
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
