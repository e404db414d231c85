"""
Root pytest configuration for the RetailMetrics mock API.

Plugins are declared here rather than in tests/conftest.py; pytest 8 only
honours ``pytest_plugins`` in the rootdir conftest.
"""

# Async ASGI client tests under tests/integration
pytest_plugins = ("pytest_asyncio",)
