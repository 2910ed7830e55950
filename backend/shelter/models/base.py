"""
模型公共基类
为动物表和家庭表提供统一的时间戳字段
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampModel(SQLModel):
    """时间戳基类：记录创建时间，更新时由 SQLAlchemy 自动刷新 updated_at"""
    created_at: Optional[datetime] = Field(default_factory=_utcnow, nullable=False)
    updated_at: Optional[datetime] = Field(
        default_factory=_utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": _utcnow}
    )
