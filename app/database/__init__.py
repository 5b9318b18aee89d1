from app.database.async_db import (
    check_db_connection,
    dispose_async_engine,
    get_async_db,
    get_async_db_context,
    get_async_engine,
)

__all__ = [
    "check_db_connection",
    "dispose_async_engine",
    "get_async_db",
    "get_async_db_context",
    "get_async_engine",
]
