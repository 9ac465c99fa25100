# Integration Tests
"""
Integration tests run the controller, repository and HTTP API against a
real temporary database.

Principle: Test behavior, not implementation.
"""
