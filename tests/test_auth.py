from app.core.config import settings
from app.core.security import create_access_token, create_admin_access_token, decode_access_token
from tests.conftest import ADMIN_USERNAME, register, auth_headers


def test_register_returns_token_and_user(client):
    body = register(client, 'alice')

    assert body['message'] == 'User registered successfully'
    assert body['user']['username'] == 'alice'
    assert body['user']['email'] == 'alice@example.com'
    assert 'password_hash' not in body['user']
    claims = decode_access_token(body['token'])
    assert claims['user_id'] == body['user']['id']
    assert claims['username'] == 'alice'


def test_register_rejects_duplicate_username_or_email(client):
    register(client, 'alice')

    same_username = client.post('/api/auth/register', json={
        'username': 'alice', 'email': 'other@example.com', 'password': 'secret123'
    })
    same_email = client.post('/api/auth/register', json={
        'username': 'alice2', 'email': 'alice@example.com', 'password': 'secret123'
    })

    assert same_username.status_code == 400
    assert same_username.json() == {'error': 'Username or email already exists'}
    assert same_email.status_code == 400


def test_register_requires_all_fields(client):
    response = client.post('/api/auth/register', json={'username': 'alice'})

    assert response.status_code == 400
    assert 'email' in response.json()['error']


def test_login_with_username_or_email(client):
    register(client, 'alice')

    by_username = client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret123'})
    by_email = client.post('/api/auth/login', json={'username': 'alice@example.com', 'password': 'secret123'})

    assert by_username.status_code == 200
    assert by_username.json()['message'] == 'Login successful'
    assert by_email.status_code == 200
    assert by_email.json()['user']['username'] == 'alice'


def test_login_failures_are_generic(client):
    register(client, 'alice')

    wrong_password = client.post('/api/auth/login', json={'username': 'alice', 'password': 'nope-nope'})
    unknown_user = client.post('/api/auth/login', json={'username': 'ghost', 'password': 'secret123'})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {'error': 'Invalid credentials'}


def test_profile_requires_token(client):
    assert client.get('/api/auth/profile').status_code == 401
    bad = client.get('/api/auth/profile', headers=auth_headers('not-a-token'))
    assert bad.status_code == 401
    assert bad.json() == {'error': 'Invalid or expired token'}


def test_get_profile(client, user_headers):
    response = client.get('/api/auth/profile', headers=user_headers)

    assert response.status_code == 200
    user = response.json()['user']
    assert user['username'] == 'alice'
    assert user['created_at'] is not None


def test_update_profile_reissues_token(client, user_headers):
    response = client.put('/api/auth/profile', headers=user_headers, json={
        'username': 'alice-renamed', 'email': 'alice@example.com'
    })

    assert response.status_code == 200
    body = response.json()
    assert body['user']['username'] == 'alice-renamed'
    assert decode_access_token(body['token'])['username'] == 'alice-renamed'


def test_update_profile_rejects_taken_username(client, user_headers, other_headers):
    response = client.put('/api/auth/profile', headers=user_headers, json={
        'username': 'bob', 'email': 'alice@example.com'
    })

    assert response.status_code == 400
    assert response.json() == {'error': 'Username or email is already taken'}


def test_change_password(client, user_headers):
    wrong = client.put('/api/auth/password', headers=user_headers, json={
        'current_password': 'wrong-one', 'new_password': 'brand-new-pw'
    })
    assert wrong.status_code == 401
    assert wrong.json() == {'error': 'Current password is incorrect'}

    ok = client.put('/api/auth/password', headers=user_headers, json={
        'current_password': 'secret123', 'new_password': 'brand-new-pw'
    })
    assert ok.status_code == 200
    assert ok.json() == {'message': 'Password updated successfully'}

    assert client.post('/api/auth/login', json={'username': 'alice', 'password': 'secret123'}).status_code == 401
    assert client.post('/api/auth/login', json={'username': 'alice', 'password': 'brand-new-pw'}).status_code == 200


def test_long_login_password_is_rejected_not_crashed(client):
    register(client, 'alice')

    response = client.post('/api/auth/login', json={'username': 'alice', 'password': 'x' * 80})

    assert response.status_code == 401
    assert response.json() == {'error': 'Invalid credentials'}


def test_register_with_multibyte_password(client):
    password = 'é' * 40
    register(client, 'alice', password=password)

    response = client.post('/api/auth/login', json={'username': 'alice', 'password': password})

    assert response.status_code == 200


def test_change_password_with_long_current_password(client, user_headers):
    response = client.put('/api/auth/password', headers=user_headers, json={
        'current_password': 'y' * 100, 'new_password': 'brand-new-pw'
    })

    assert response.status_code == 401
    assert response.json() == {'error': 'Current password is incorrect'}


def test_email_is_stored_and_matched_as_given(client):
    body = register(client, 'dave', email='Dave@Example.COM')

    response = client.post('/api/auth/login', json={'username': 'Dave@Example.COM', 'password': 'secret123'})

    assert body['user']['email'] == 'Dave@Example.COM'
    assert response.status_code == 200
    assert response.json()['user']['username'] == 'dave'


def test_register_rejects_malformed_email(client):
    response = client.post('/api/auth/register', json={
        'username': 'alice', 'email': 'not-an-email', 'password': 'secret123'
    })

    assert response.status_code == 400
    assert response.json()['error'].startswith('email: value is not a valid email address')


def test_expired_user_token_is_rejected(client, monkeypatch):
    user = register(client, 'alice')['user']
    monkeypatch.setattr(settings, 'ACCESS_TOKEN_EXPIRE_SECONDS', -1)
    expired = create_access_token(user['id'], user['username'])

    response = client.get('/api/auth/profile', headers=auth_headers(expired))

    assert response.status_code == 401
    assert response.json() == {'error': 'Invalid or expired token'}


def test_expired_admin_token_is_rejected(client, monkeypatch):
    monkeypatch.setattr(settings, 'ADMIN_ACCESS_TOKEN_EXPIRE_SECONDS', -1)
    expired = create_admin_access_token(ADMIN_USERNAME)

    response = client.get('/api/admin/users', headers=auth_headers(expired))

    assert response.status_code == 403
    assert response.json() == {'error': 'Invalid or unauthorized admin token'}
