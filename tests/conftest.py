import pytest

from app import app as flask_app
from config import get_config


@pytest.fixture
def app():
    flask_app.config.from_object(get_config('testing'))
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()
