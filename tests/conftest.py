import os
import tempfile

# Keep log files out of the working tree; must happen before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='golem_wordle_logs_'))

import pytest

from golem_wordle import create_app
from golem_wordle.config import TestingConfig
from golem_wordle.services.game_service import GameService
from golem_wordle.utils.clock import ManualClock

WORD = "golem"
WRONG_ANSWER = "abcde"


@pytest.fixture
def clock():
    return ManualClock.at(2312, 12, 18, 19, 23)


@pytest.fixture
def game_service(clock):
    return GameService(lambda: WORD, clock)


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig, game_service)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
