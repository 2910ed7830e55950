"""
数据库初始化脚本
负责创建引擎、建表以及提供会话工厂
"""

import os
from pathlib import Path
from typing import Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

# 导入模型，确保建表前所有表已注册到 metadata
from shelter.models import Animal, Family  # noqa: F401
from shelter.utils.logger import get_logger

logger = get_logger(__name__)


def get_database_url() -> str:
    """
    获取数据库连接 URL
    优先使用 DATABASE_URL，其次 DATABASE_PATH 指定的 SQLite 文件
    """
    database_url = os.environ.get("DATABASE_URL")
    if database_url:
        return database_url

    db_path = os.environ.get("DATABASE_PATH", "shelter.db")
    if not os.path.isabs(db_path):
        # 从项目根目录解析
        project_root = Path(__file__).parent.parent.parent
        db_path = str(project_root / db_path)
    return f"sqlite:///{db_path}"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite 默认不检查外键
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    创建并返回数据库引擎

    Args:
        database_url: 连接 URL，为 None 时使用 get_database_url()
    """
    database_url = database_url or get_database_url()
    echo = os.environ.get("SQL_ECHO", "false").lower() in ("1", "true", "yes")

    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=echo)

    engine = create_engine(
        database_url,
        echo=echo,
        connect_args={"check_same_thread": False}  # SQLite 特有配置
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_tables(engine: Engine) -> None:
    """
    创建所有数据库表（已存在则跳过）
    """
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created at %s", engine.url)


def get_session(engine: Optional[Engine] = None) -> Session:
    """
    会话工厂

    Args:
        engine: 数据库引擎，为 None 时按环境配置新建

    Returns:
        新的 SQLModel Session，调用方负责关闭（推荐用 with 语句）
    """
    return Session(engine or get_engine())


def init_db(database_url: Optional[str] = None) -> Engine:
    """
    完整的数据库初始化流程
    1. 创建数据库引擎
    2. 创建所有表结构

    Returns:
        初始化完成的引擎
    """
    engine = get_engine(database_url)
    create_tables(engine)
    return engine


if __name__ == "__main__":
    init_db()
    print(f"Database schema created at {get_database_url()}")
