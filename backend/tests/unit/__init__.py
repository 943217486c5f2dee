"""
Unit Tests

Unit tests run in isolation without external dependencies.
The session store is an in-memory fake or a mocked database session.

These tests are fast and can run without Docker or any services running.
"""
