"""
Integration tests for /api/admin/stats endpoint
"""


class TestStatsEndpoint:
    """Test suite for /api/admin/stats endpoint"""

    def test_stats_empty(self, api):
        response = api.get('/api/admin/stats')

        assert response.status_code == 200
        assert response.get_json() == {
            'users': 0,
            'reservations': 0,
            'confirmed': 0,
            'pending': 0,
            'payments': 0
        }

    def test_stats_after_activity(self, api, reservation_data):
        api.post('/api/register', {'username': 'alice', 'password': 'pw'})
        api.post('/api/register', {'username': 'bob', 'password': 'pw'})
        paid = api.post('/api/reserve', reservation_data(type='day', amount=2)).get_json()
        api.post('/api/reserve', reservation_data(type='hour', amount=1))
        api.post('/api/reserve', reservation_data(type='month', amount=1))
        api.post('/api/payment/create', {'reservationId': paid['reservation']['id']})

        stats = api.get('/api/admin/stats').get_json()

        assert stats == {
            'users': 2,
            'reservations': 3,
            'confirmed': 1,
            'pending': 2,
            'payments': 1
        }
