"""__init__.py for tests."""
