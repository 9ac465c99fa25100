"""Async database infrastructure.

This module provides async database connectivity using aiosqlite.
"""
from .connection import (
    AsyncConnectionPool,
    connect,
    create_schema,
    get_async_db,
    release_async_db,
    init_async_db,
    clear_async_db,
    close_async_db,
)

__all__ = [
    'AsyncConnectionPool',
    'connect',
    'create_schema',
    'get_async_db',
    'release_async_db',
    'init_async_db',
    'clear_async_db',
    'close_async_db',
]
