# Infrastructure layer - database connections and repositories
"""
Infrastructure layer contains:
- Async SQLite connection pool and schema
- Database repositories
"""
