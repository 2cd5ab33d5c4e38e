# test_app.py
"""
Tests for the Flask host routes.
"""

from contextlib import contextmanager

import pytest

import main


@contextmanager
def host_settings(**overrides):
    """Apply Flask config overrides with an empty session table, restoring both afterwards."""
    saved = {key: main.app.config.get(key) for key in overrides}
    main.app.config.update(overrides)
    main.GAMES.clear()
    try:
        yield main.app.config
    finally:
        for loop in main.GAMES.values():
            loop.stop()
        main.GAMES.clear()
        main.app.config.update(saved)


@pytest.fixture
def client():
    with host_settings(AUTO_START=False, TESTING=True):
        with main.app.test_client() as client:
            yield client


@pytest.fixture
def cookieless_client():
    with host_settings(AUTO_START=True, TESTING=True):
        with main.app.test_client(use_cookies=False) as client:
            yield client


def test_index_page(client):
    resp = client.get('/')
    assert resp.status_code == 200
    assert b'/frame/left.png' in resp.data
    assert 'snake_session' in resp.headers.get('Set-Cookie', '')


def test_state_is_per_session(client):
    first = client.get('/get_state').get_json()
    assert first['is_alive'] is True
    assert first['apples_eaten'] == 0
    assert first['remaining_seconds'] == 20

    client.get('/get_state')
    assert len(main.GAMES) == 1


@pytest.mark.parametrize("side", ["left", "right"])
def test_frame_png(client, side):
    resp = client.get(f'/frame/{side}.png')
    assert resp.status_code == 200
    assert resp.mimetype == 'image/png'
    assert resp.data.startswith(b'\x89PNG')


def test_unknown_side(client):
    assert client.get('/frame/middle.png').status_code == 404
    assert client.post('/press/middle').status_code == 404


def test_press_buffers_turn(client):
    data = client.post('/press/right').get_json()
    assert data['pending_direction'] == 'down'
    data = client.post('/press/left').get_json()
    assert data['pending_direction'] == 'up'


def test_host_settings_are_restored():
    before = main.app.config['AUTO_START']
    with host_settings(AUTO_START=not before):
        assert main.app.config['AUTO_START'] is (not before)
    assert main.app.config['AUTO_START'] == before
    assert main.GAMES == {}


def test_polling_does_not_start_loops(cookieless_client):
    for _ in range(25):
        assert cookieless_client.get('/get_state').status_code == 200
    assert not any(loop.running for loop in main.GAMES.values())


def test_page_load_starts_loop(cookieless_client):
    cookieless_client.get('/')
    running = [loop for loop in main.GAMES.values() if loop.running]
    assert len(running) == 1
    assert running[0].idle_timeout == main.CONFIG['session_timeout']


def test_idle_sessions_are_evicted(cookieless_client):
    cookieless_client.get('/')
    (old_id, old_loop), = main.GAMES.items()
    old_loop.last_access = old_loop.clock() - main.CONFIG['session_timeout'] - 1

    cookieless_client.get('/get_state')

    assert old_id not in main.GAMES
    assert not old_loop.running
    assert len(main.GAMES) == 1


def test_active_session_is_kept(client):
    client.get('/')
    (user_id, loop), = main.GAMES.items()
    loop.last_access = loop.clock() - main.CONFIG['session_timeout'] + 5
    client.get('/get_state')
    assert list(main.GAMES) == [user_id]
