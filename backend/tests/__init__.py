"""
Study Record Test Suite

Test Structure:
    tests/
    ├── conftest.py              # Shared fixtures and environment setup
    └── unit/                    # Unit tests (isolated, no external services)
        ├── fakes.py             # In-memory SessionStore and session builders
        ├── test_statistics.py   # Day/week/month/year/overall roll-ups
        ├── test_streak_tracking.py
        ├── test_session_store.py  # SqlSessionStore against a mocked AsyncSession
        └── test_analytics_api.py  # HTTP endpoints with the store overridden

Running Tests:
    # Run all tests
    pytest backend/tests/ -v

    # Run with coverage
    pytest backend/tests/ --cov=studyrecord --cov-report=html
"""
