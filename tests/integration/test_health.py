"""
Integration Tests for liveness and app-level error handling
"""

from unittest.mock import patch


class TestLiveness:

    def test_root_returns_liveness_text(self, client):
        response = client.get('/')

        assert response.status_code == 200
        assert response.mimetype == 'text/plain'
        assert response.get_data(as_text=True) == 'KivRims Backend API is running!'

    def test_repeated_calls_are_identical_and_skip_database(self, client, db):
        with patch.object(db, 'session') as mock_session:
            bodies = {client.get('/').get_data(as_text=True) for _ in range(5)}

        assert bodies == {'KivRims Backend API is running!'}
        assert mock_session.mock_calls == []

    def test_cors_headers_present(self, client):
        response = client.get('/', headers={'Origin': 'https://kivrims.example'})
        assert response.headers.get('Access-Control-Allow-Origin') == '*'


class TestErrorHandlers:

    def test_unknown_route_returns_json_404(self, client):
        response = client.get('/api/unknown')

        assert response.status_code == 404
        assert response.get_json()['message'] == 'Not found'

    def test_wrong_method_returns_json_405(self, client):
        response = client.get('/api/stk-push')

        assert response.status_code == 405
        assert response.get_json()['message'] == 'Method not allowed'
