import os
import tempfile

# config.py refuses to load without a secret key
os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('ROSTER_DATA_DIR', os.path.join(tempfile.gettempdir(), 'roster-test-data'))

import pytest

from config import TestConfig
from roster import create_app
from roster.domain.directory import Directory
from roster.infrastructure.department_sources import StaticDepartmentSource


@pytest.fixture
def app(tmp_path):
    class _Config(TestConfig):
        SESSION_DIR = str(tmp_path / 'sessions')

    app = create_app(_Config)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def directory():
    return Directory.from_source(StaticDepartmentSource())
