from datetime import timedelta

from mixtape.core.security import create_access_token


class TestHealthEndpoints:

    def test_ping(self, client):
        response = client.get('/ping')
        assert response.status_code == 200
        assert response.text == 'pong'

    def test_health(self, client):
        assert client.get('/health').json() == {'status': 'healthy'}

    def test_home_without_frontend(self, client):
        response = client.get('/')
        assert response.status_code == 404
        assert 'index.html' in response.text


class TestAuthEndpoints:

    def test_register_returns_user_and_token(self, client):
        response = client.post('/api/register', json={'username': 'alice', 'password': 'secret'})
        assert response.status_code == 200
        data = response.json()
        assert data['user']['username'] == 'alice'
        assert isinstance(data['user']['id'], int)
        assert data['token']

    def test_register_duplicate(self, client, signup):
        signup('alice')
        response = client.post('/api/register', json={'username': 'alice', 'password': 'other'})
        assert response.status_code == 400
        assert response.json() == {'error': 'Usuario ya existe'}

    def test_register_short_password(self, client):
        response = client.post('/api/register', json={'username': 'alice', 'password': 'abc'})
        assert response.status_code == 400
        assert 'error' in response.json()

    def test_register_without_body(self, client):
        response = client.post('/api/register', json={})
        assert response.status_code == 400

    def test_register_with_no_body_at_all(self, client):
        response = client.post('/api/register')
        assert response.status_code == 400
        assert response.json() == {'error': 'username y password (>=4)'}

    def test_login_with_no_body_at_all(self, client):
        response = client.post('/api/login')
        assert response.status_code == 400
        assert response.json() == {'error': 'Usuario inexistente'}

    def test_long_password(self, client):
        password = 'a' * 80
        response = client.post('/api/register', json={'username': 'longpw', 'password': password})
        assert response.status_code == 200
        response = client.post('/api/login', json={'username': 'longpw', 'password': password})
        assert response.status_code == 200

    def test_login_unknown_user(self, client):
        response = client.post('/api/login', json={'username': 'ghost', 'password': 'secret'})
        assert response.status_code == 400
        assert response.json() == {'error': 'Usuario inexistente'}

    def test_login_returns_same_user(self, client, signup):
        user, _ = signup('alice')
        response = client.post('/api/login', json={'username': 'alice', 'password': 'secret'})
        assert response.status_code == 200
        assert response.json()['user'] == user

    def test_me(self, client, signup):
        user, headers = signup('alice')
        response = client.get('/api/me', headers=headers)
        assert response.status_code == 200
        me = response.json()['user']
        assert me['id'] == user['id']
        assert me['username'] == 'alice'
        assert me['created_at']


class TestAuthorizationGate:

    def test_missing_token(self, client):
        for path in ('/api/me', '/api/playlists', '/api/playlists/1'):
            response = client.get(path)
            assert response.status_code == 401
            assert response.json() == {'error': 'No token'}

    def test_invalid_token(self, client):
        response = client.get('/api/playlists', headers={'Authorization': 'Bearer nonsense'})
        assert response.status_code == 401
        assert response.json() == {'error': 'Token inválido'}

    def test_present_but_unusable_header(self, client):
        for value in ('Token abc', 'Bearer', 'Bearer   ', 'nonsense'):
            response = client.get('/api/me', headers={'Authorization': value})
            assert response.status_code == 401, value
            assert response.json() == {'error': 'Token inválido'}

    def test_scheme_is_case_insensitive(self, client, signup):
        _, headers = signup('alice')
        token = headers['Authorization'].split(' ', 1)[1]
        response = client.get('/api/me', headers={'Authorization': f'bearer {token}'})
        assert response.status_code == 200

    def test_expired_token(self, client, signup):
        user, _ = signup('alice')
        token = create_access_token(user['id'], 'alice', timedelta(seconds=-10))
        response = client.get('/api/me', headers={'Authorization': f'Bearer {token}'})
        assert response.status_code == 401
        assert response.json() == {'error': 'Token inválido'}

    def test_token_for_vanished_user(self, client):
        token = create_access_token(999, 'ghost')
        response = client.get('/api/me', headers={'Authorization': f'Bearer {token}'})
        assert response.status_code == 401


class TestPlaylistEndpoints:

    def test_road_trip_scenario(self, client):
        response = client.post('/api/register', json={'username': 'alice', 'password': 'secret'})
        headers = {'Authorization': f"Bearer {response.json()['token']}"}

        response = client.post('/api/login', json={'username': 'alice', 'password': 'wrong'})
        assert response.status_code == 400
        assert response.json() == {'error': 'Contraseña incorrecta'}

        response = client.post('/api/playlists', json={'nombre': 'road trip'}, headers=headers)
        assert response.status_code == 200
        playlist = response.json()['playlist']
        assert playlist['id'] == 1
        assert playlist['nombre'] == 'road trip'

        response = client.post('/api/playlists/1/songs', json={'titulo': 'X'}, headers=headers)
        assert response.status_code == 200
        assert response.json()['song']['orden'] == 0

        response = client.get('/api/playlists/1', headers=headers)
        assert response.status_code == 200
        canciones = response.json()['canciones']
        assert len(canciones) == 1
        assert canciones[0]['titulo'] == 'X'
        assert canciones[0]['orden'] == 0

        assert client.delete('/api/playlists/1', headers=headers).json() == {'ok': True}

        response = client.get('/api/playlists/1', headers=headers)
        assert response.status_code == 404
        assert response.json() == {'error': 'No encontrada'}

    def test_list(self, client, signup):
        _, headers = signup('alice')
        client.post('/api/playlists', json={'nombre': 'first'}, headers=headers)
        client.post('/api/playlists', json={'nombre': 'second'}, headers=headers)
        playlists = client.get('/api/playlists', headers=headers).json()['playlists']
        assert [p['nombre'] for p in playlists] == ['second', 'first']
        assert set(playlists[0]) == {'id', 'nombre', 'created_at'}

    def test_create_requires_name(self, client, signup):
        _, headers = signup('alice')
        response = client.post('/api/playlists', json={}, headers=headers)
        assert response.status_code == 400
        assert response.json() == {'error': 'Nombre requerido'}
        assert client.get('/api/playlists', headers=headers).json() == {'playlists': []}

    def test_rename(self, client, signup):
        _, headers = signup('alice')
        playlist_id = client.post('/api/playlists', json={'nombre': 'old'}, headers=headers).json()['playlist']['id']
        response = client.put(f'/api/playlists/{playlist_id}', json={'nombre': 'new'}, headers=headers)
        assert response.status_code == 200
        assert response.json()['playlist']['nombre'] == 'new'

        response = client.put(f'/api/playlists/{playlist_id}', json={'nombre': ''}, headers=headers)
        assert response.status_code == 400

    def test_song_wire_shape(self, client, signup):
        _, headers = signup('alice')
        playlist_id = client.post('/api/playlists', json={'nombre': 'mix'}, headers=headers).json()['playlist']['id']
        song = client.post(
            f'/api/playlists/{playlist_id}/songs',
            json={'titulo': 'Song', 'artista': 'Band', 'ruta': 'music/song.mp3', 'duration': 200},
            headers=headers,
        ).json()['song']
        assert set(song) == {'id', 'titulo', 'artista', 'ruta', 'duration', 'orden'}
        assert song['duration'] == 200

    def test_delete_and_clear_songs(self, client, signup):
        _, headers = signup('alice')
        playlist_id = client.post('/api/playlists', json={'nombre': 'mix'}, headers=headers).json()['playlist']['id']
        ids = [
            client.post(f'/api/playlists/{playlist_id}/songs', json={'titulo': t}, headers=headers).json()['song']['id']
            for t in ('a', 'b', 'c')
        ]

        response = client.delete(f'/api/playlists/{playlist_id}/songs/{ids[1]}', headers=headers)
        assert response.json() == {'ok': True}
        canciones = client.get(f'/api/playlists/{playlist_id}', headers=headers).json()['canciones']
        assert [c['titulo'] for c in canciones] == ['a', 'c']

        assert client.delete(f'/api/playlists/{playlist_id}/songs', headers=headers).json() == {'ok': True}
        assert client.get(f'/api/playlists/{playlist_id}', headers=headers).json()['canciones'] == []

    def test_non_numeric_ids_match_nothing(self, client, signup):
        _, headers = signup('alice')
        for method, path in (
            ('GET', '/api/playlists/abc'),
            ('PUT', '/api/playlists/abc'),
            ('POST', '/api/playlists/abc/songs'),
            ('DELETE', '/api/playlists/abc/songs'),
        ):
            response = client.request(method, path, json={'nombre': 'x', 'titulo': 'x'}, headers=headers)
            assert response.status_code == 404, path
            assert response.json() == {'error': 'No encontrada'}

    def test_deletes_with_non_numeric_ids_succeed(self, client, signup):
        _, headers = signup('alice')
        for path in ('/api/playlists/abc', '/api/playlists/abc/songs/1', '/api/playlists/1/songs/xyz'):
            response = client.delete(path, headers=headers)
            assert response.status_code == 200, path
            assert response.json() == {'ok': True}

    def test_bad_body_is_still_a_bad_request(self, client, signup):
        _, headers = signup('alice')
        playlist_id = client.post('/api/playlists', json={'nombre': 'mix'}, headers=headers).json()['playlist']['id']
        response = client.post(f'/api/playlists/{playlist_id}/songs', json={'duration': 'long'}, headers=headers)
        assert response.status_code == 400

    def test_missing_body_uses_service_messages(self, client, signup):
        _, headers = signup('alice')
        response = client.post('/api/playlists', headers=headers)
        assert response.status_code == 400
        assert response.json() == {'error': 'Nombre requerido'}


class TestOwnership:

    def _bob_playlist_with_song(self, client, signup):
        _, bob = signup('bob')
        playlist_id = client.post('/api/playlists', json={'nombre': "bob's"}, headers=bob).json()['playlist']['id']
        song_id = client.post(
            f'/api/playlists/{playlist_id}/songs', json={'titulo': 'mine'}, headers=bob
        ).json()['song']['id']
        return bob, playlist_id, song_id

    def test_foreign_playlist_is_not_found(self, client, signup):
        bob, playlist_id, _ = self._bob_playlist_with_song(client, signup)
        _, alice = signup('alice')

        assert client.get(f'/api/playlists/{playlist_id}', headers=alice).status_code == 404
        assert client.put(f'/api/playlists/{playlist_id}', json={'nombre': 'x'}, headers=alice).status_code == 404
        assert client.post(f'/api/playlists/{playlist_id}/songs', json={'titulo': 'x'}, headers=alice).status_code == 404
        assert client.delete(f'/api/playlists/{playlist_id}/songs', headers=alice).status_code == 404
        assert client.get('/api/playlists', headers=alice).json() == {'playlists': []}

        detail = client.get(f'/api/playlists/{playlist_id}', headers=bob).json()
        assert detail['playlist']['nombre'] == "bob's"
        assert len(detail['canciones']) == 1

    def test_foreign_and_missing_look_the_same(self, client, signup):
        _, playlist_id, _ = self._bob_playlist_with_song(client, signup)
        _, alice = signup('alice')
        foreign = client.get(f'/api/playlists/{playlist_id}', headers=alice)
        missing = client.get('/api/playlists/9999', headers=alice)
        assert (foreign.status_code, foreign.json()) == (missing.status_code, missing.json())

    def test_foreign_deletes_succeed_but_change_nothing(self, client, signup):
        bob, playlist_id, song_id = self._bob_playlist_with_song(client, signup)
        _, alice = signup('alice')

        response = client.delete(f'/api/playlists/{playlist_id}/songs/{song_id}', headers=alice)
        assert response.status_code == 200
        assert response.json() == {'ok': True}

        response = client.delete(f'/api/playlists/{playlist_id}', headers=alice)
        assert response.status_code == 200
        assert response.json() == {'ok': True}

        detail = client.get(f'/api/playlists/{playlist_id}', headers=bob).json()
        assert [c['id'] for c in detail['canciones']] == [song_id]
