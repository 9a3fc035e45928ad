import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import get_application

ADMIN_USERNAME = 'root-admin'
ADMIN_PASSWORD = 'admin-secret'


@pytest.fixture
def app_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, 'DATABASE_URL', f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setattr(settings, 'SECRET_KEY', 'test-secret')
    monkeypatch.setattr(settings, 'BCRYPT_ROUNDS', 4)
    monkeypatch.setattr(settings, 'ADMIN_USERNAME', ADMIN_USERNAME)
    monkeypatch.setattr(settings, 'ADMIN_PASSWORD', ADMIN_PASSWORD)
    monkeypatch.setattr(settings, 'FRONTEND_DIST_DIR', str(tmp_path / 'no-frontend'))
    return settings


@pytest.fixture
def client(app_settings):
    with TestClient(get_application()) as test_client:
        yield test_client


def register(client, username='alice', email=None, password='secret123'):
    response = client.post('/api/auth/register', json={
        'username': username,
        'email': email or f'{username}@example.com',
        'password': password,
    })
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def user_headers(client):
    return auth_headers(register(client, 'alice')['token'])


@pytest.fixture
def other_headers(client):
    return auth_headers(register(client, 'bob')['token'])
