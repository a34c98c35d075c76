"""
Pytest configuration and fixtures for formstore tests.
"""

import os
import sys
import tempfile
import shutil
import pytest

# Add python directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'python'))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmp = tempfile.mkdtemp(prefix="formstore-test-")
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def make_store():
    """Factory building a FormStore from plain save path / disabled form settings."""
    from formstore import FormStore, StoreConfig

    def _make(save_paths=None, disabled_forms=None, default_save_path=None):
        config = StoreConfig(
            save_paths=save_paths,
            disabled_forms=disabled_forms or {},
            default_save_path=default_save_path,
        )
        return FormStore(config)

    return _make


@pytest.fixture
def forms_dir(temp_dir):
    """Path of the single save path used by form_store."""
    return os.path.join(temp_dir, "forms")


@pytest.fixture
def form_store(make_store, forms_dir):
    """Create a FormStore with one enabled save path inside the temp directory."""
    return make_store(save_paths={forms_dir: True})


@pytest.fixture
def sample_form():
    """Sample form definition."""
    return {
        "identifier": "contact-form",
        "label": "Contact",
        "type": "Neos.Form:Form",
        "renderables": [
            {
                "identifier": "page-one",
                "type": "Neos.Form:Page",
                "renderables": [
                    {"identifier": "name", "type": "Neos.Form:SingleLineText", "label": "Name"},
                    {"identifier": "email", "type": "Neos.Form:SingleLineText", "label": "E-Mail"},
                ],
            }
        ],
        "finishers": [
            {"identifier": "Neos.Form:Confirmation", "options": {"message": "Danke!"}},
        ],
    }


# Pytest markers
def pytest_configure(config):
    config.addinivalue_line("markers", "p0: Priority 0 (critical) tests")
    config.addinivalue_line("markers", "p1: Priority 1 (high) tests")
    config.addinivalue_line("markers", "p2: Priority 2 (medium) tests")
