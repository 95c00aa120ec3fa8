import json
import os

from localrot import create_app, close_app


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


class TestAuthEndpoints:
    """Test /api/register and /api/login."""

    def test_register(self, client):
        response = post_json(client, '/api/register', {'username': 'alice', 'password': 'pw'})

        assert response.status_code == 200
        assert response.get_json() == {'success': True}

    def test_register_missing_fields(self, client):
        response = post_json(client, '/api/register', {'username': 'alice'})

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Missing fields'

    def test_register_duplicate(self, client):
        post_json(client, '/api/register', {'username': 'alice', 'password': 'pw'})

        response = post_json(client, '/api/register', {'username': 'alice', 'password': 'other'})

        assert response.status_code == 409
        assert response.get_json()['message'] == 'User already exists'

    def test_login(self, client):
        post_json(client, '/api/register', {'username': 'alice', 'password': 'pw'})

        response = post_json(client, '/api/login', {'username': 'alice', 'password': 'pw'})

        assert response.status_code == 200
        json_data = response.get_json()
        assert json_data['success'] is True
        assert json_data['user']['username'] == 'alice'
        assert json_data['user']['id'].startswith('USR_')
        assert 'password' not in json_data['user']

    def test_login_wrong_password(self, client):
        post_json(client, '/api/register', {'username': 'alice', 'password': 'pw'})

        response = post_json(client, '/api/login', {'username': 'alice', 'password': 'nope'})

        assert response.status_code == 401
        assert response.get_json()['message'] == 'Invalid credentials'

    def test_login_unusable_payload(self, client):
        response = client.post('/api/login', data='not json', content_type='application/json')

        assert response.status_code == 401

    def test_register_form_encoded(self, client):
        response = client.post('/api/register', data={'username': 'alice', 'password': 'pw'})

        assert response.status_code == 200
        assert response.get_json() == {'success': True}

        login = client.post('/api/login', data={'username': 'alice', 'password': 'pw'})
        assert login.status_code == 200


class TestReservationEndpoints:
    """Test /api/reserve and /api/reservations/<username>."""

    def test_reserve_day(self, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(type='day', amount=3))

        assert response.status_code == 200
        reservation = response.get_json()['reservation']
        assert reservation['price'] == 6.0
        assert reservation['status'] == 'PENDING_PAYMENT'
        assert reservation['id'].startswith('RES_')

    def test_reserve_form_encoded(self, client, reservation_data):
        response = client.post('/api/reserve', data=reservation_data(type='day', amount='3'))

        assert response.status_code == 200
        reservation = response.get_json()['reservation']
        assert reservation['amount'] == 3
        assert reservation['price'] == 6.0
        assert reservation['status'] == 'PENDING_PAYMENT'

    def test_reserve_keeps_whole_amount(self, app, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(type='day', amount=3))

        amount = response.get_json()['reservation']['amount']
        assert amount == 3
        assert isinstance(amount, int)
        with open(os.path.join(app.config['DATA_DIR'], 'reservations.json')) as fh:
            stored = json.load(fh)
        assert stored[0]['amount'] == 3
        assert isinstance(stored[0]['amount'], int)

    def test_reserve_keeps_fractional_amount(self, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(type='day', amount=1.5))

        reservation = response.get_json()['reservation']
        assert reservation['amount'] == 1.5
        assert reservation['price'] == 3.0

    def test_reserve_free_hours(self, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(type='hour', amount=3))

        reservation = response.get_json()['reservation']
        assert reservation['price'] == 0
        assert reservation['status'] == 'CONFIRMED'

    def test_reserve_two_months(self, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(type='month', amount=2))

        assert response.get_json()['reservation']['price'] == 9.98

    def test_reserve_without_date(self, client, reservation_data):
        payload = reservation_data()
        del payload['date']

        response = post_json(client, '/api/reserve', payload)

        assert response.status_code == 200
        assert response.get_json()['reservation']['date'] is None

    def test_reserve_missing_fields(self, client, reservation_data):
        payload = reservation_data()
        del payload['game']

        response = post_json(client, '/api/reserve', payload)

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid data'

    def test_reserve_zero_amount(self, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(amount=0))

        assert response.status_code == 400

    def test_reserve_invalid_email(self, client, reservation_data):
        response = post_json(client, '/api/reserve', reservation_data(email='not-an-email'))

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid email'

    def test_list_reservations(self, client, reservation_data):
        post_json(client, '/api/reserve', reservation_data(username='alice'))
        post_json(client, '/api/reserve', reservation_data(username='bob'))

        response = client.get('/api/reservations/alice')

        assert response.status_code == 200
        json_data = response.get_json()
        assert len(json_data) == 1
        assert json_data[0]['username'] == 'alice'

    def test_list_reservations_unknown_user(self, client):
        response = client.get('/api/reservations/nobody')

        assert response.status_code == 200
        assert response.get_json() == []


class TestPaymentEndpoints:
    """Test /api/payment/create and /api/paypal/webhook."""

    def test_create_payment_not_found(self, client):
        response = post_json(client, '/api/payment/create', {'reservationId': 'RES_missing'})

        assert response.status_code == 404
        assert response.get_json()['message'] == 'Reservation not found'

    def test_create_payment_missing_reservation_id(self, client):
        response = post_json(client, '/api/payment/create', {})

        assert response.status_code == 400

    def test_create_payment(self, client, reservation_data):
        reservation = post_json(client, '/api/reserve', reservation_data()).get_json()['reservation']

        response = post_json(client, '/api/payment/create', {'reservationId': reservation['id']})

        assert response.status_code == 200
        json_data = response.get_json()
        assert json_data['success'] is True
        assert json_data['payment']['status'] == 'CREATED'
        assert json_data['payment']['reservationId'] == reservation['id']

    def test_webhook_always_acknowledges(self, client):
        response = client.post('/api/paypal/webhook', data='garbage', content_type='text/plain')

        assert response.status_code == 200
        assert response.get_json()['processed'] is False

    def test_webhook_malformed_supplementary_data(self, client):
        event = {
            'event_type': 'PAYMENT.CAPTURE.COMPLETED',
            'resource': {'id': 'CAPTURE-1', 'supplementary_data': 'oops'}
        }

        response = post_json(client, '/api/paypal/webhook', event)

        assert response.status_code == 200
        assert response.get_json() == {'success': True, 'processed': False}


class TestMisc:

    def test_unknown_route(self, client):
        response = client.post('/api/does-not-exist')

        assert response.status_code == 404
        assert response.get_json() == {
            'error': 'Not Found',
            'message': 'Route not found',
            'status_code': 404
        }

    def test_correlation_id_echoed(self, client):
        response = client.get('/health', headers={'X-Correlation-ID': 'abc-123'})

        assert response.headers['X-Correlation-ID'] == 'abc-123'

    def test_home_without_frontend(self, client):
        response = client.get('/')

        assert response.status_code == 404

    def test_home_serves_frontend(self, app, client):
        with open(f"{app.config['PUBLIC_DIR']}/{app.config['FRONTEND_INDEX']}", 'w') as fh:
            fh.write('<html>LocalRot</html>')

        response = client.get('/')

        assert response.status_code == 200
        assert b'LocalRot' in response.data

    def test_cors_headers(self, client):
        response = client.get('/api/admin/stats', headers={'Origin': 'http://example.com'})

        assert response.headers.get('Access-Control-Allow-Origin') == '*'

    def test_cors_restricted_origins(self, tmp_path):
        app = create_app('testing', DATA_DIR=str(tmp_path / 'database'),
                         CORS_ORIGINS=['http://localrot.test'])
        client = app.test_client()
        try:
            allowed = client.get('/api/admin/stats', headers={'Origin': 'http://localrot.test'})
            denied = client.get('/api/admin/stats', headers={'Origin': 'http://example.com'})
        finally:
            close_app(app)

        assert allowed.headers.get('Access-Control-Allow-Origin') == 'http://localrot.test'
        assert 'Access-Control-Allow-Origin' not in denied.headers

    def test_assets_served_from_site_root(self, app, client):
        with open(os.path.join(app.config['PUBLIC_DIR'], 'style.css'), 'w') as fh:
            fh.write('body { color: red; }')

        response = client.get('/style.css')

        assert response.status_code == 200
        assert b'color: red' in response.data
        response.close()

    def test_missing_asset(self, client):
        response = client.get('/missing.css')

        assert response.status_code == 404
        assert response.get_json()['message'] == 'Route not found'

    def test_assets_outside_public_dir(self, client):
        response = client.get('/../database/users.json')

        assert response.status_code == 404
