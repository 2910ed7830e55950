"""
数据库模块
提供数据库连接、建表和会话工厂
"""

from .init_db import init_db, get_engine, get_database_url, create_tables, get_session

__all__ = [
    "init_db",
    "get_engine",
    "get_database_url",
    "create_tables",
    "get_session"
]
