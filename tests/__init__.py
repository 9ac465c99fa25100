# Movies Library Test Suite
"""
Test suite for Movies Library.

Every test gets its own temporary SQLite database; nothing is shared
between tests.
"""
