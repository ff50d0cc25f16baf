"""Test package for RizzSite.

Structure:
    - unit/: Individual function and class tests
    - integration/: Controller-to-backend and HTTP workflow tests

Backends are replaced by in-memory fakes from conftest.py, so no model
provider is needed. Leverages pytest with pytest-check for soft assertions.
"""
