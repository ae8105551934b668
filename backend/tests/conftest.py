import os
import sys
import pytest

# Ensure the backend root (containing the `snooker` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)
if CURRENT_DIR not in sys.path:
    sys.path.insert(0, CURRENT_DIR)

from snooker import create_app, db, socketio

from helpers import login


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    TURN_DURATION_SEC = 180
    TABLE_EXPIRY_GRACE_SEC = 30
    HOUSE_ACCOUNT = 'snooker'
    CORS_ORIGINS = ['http://localhost:5173']
    BCRYPT_LOG_ROUNDS = 4


def build_app(config_class=TestConfig):
    application = create_app(config_class)
    with application.app_context():
        # Ensure models are imported so tables are created
        import snooker.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def flask_app():
    yield from build_app()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def accounts(client):
    for name in ('admin', 'alice', 'bob'):
        res = client.post('/users/add', json={'username': name, 'password': 'password'})
        assert res.status_code == 201
    return client


@pytest.fixture()
def initialized(flask_app, accounts):
    """Configured house: alice can pay for 10 tables, the house holds 3 rewards."""
    from snooker.services.house.tokens import mint

    login(accounts, 'admin')
    res = accounts.post('/api/pool/initialize', json={
        'admin': 'admin',
        'payment_token': 'XLM',
        'payment_amount': 100,
        'reward_token': 'SNK',
        'reward_amount': 1000,
    })
    assert res.status_code == 201
    mint('XLM', 'alice', 1000)
    mint('SNK', 'snooker', 3000)
    db.session.commit()
    login(accounts, 'alice')
    return accounts


class ExpiringConfig(TestConfig):
    ENABLE_SCHEDULER_IN_TESTS = True
    TURN_DURATION_SEC = 0
    TABLE_EXPIRY_GRACE_SEC = 0


@pytest.fixture()
def expiring_client():
    """Logged-in alice on an app whose expiry task fires immediately."""
    from snooker.services.house.tokens import mint

    for application in build_app(ExpiringConfig):
        client = application.test_client()
        for name in ('admin', 'alice'):
            client.post('/users/add', json={'username': name, 'password': 'password'})
        login(client, 'admin')
        client.post('/api/pool/initialize', json={
            'admin': 'admin', 'payment_token': 'XLM', 'payment_amount': 0,
            'reward_token': 'SNK', 'reward_amount': 0,
        })
        mint('SNK', 'snooker', 10)
        db.session.commit()
        login(client, 'alice')
        yield client
