import os
import pytest

# Set test environment variables before importing the app
os.environ['FLASK_ENV'] = 'testing'

from localrot import create_app, close_app
from localrot.store import RecordStore
from localrot.repositories import UserRepository, ReservationRepository, PaymentRepository
from localrot.services import UserService, ReservationService, PaymentService, StatsService


@pytest.fixture
def app(tmp_path):
    """Create application for the tests with its own data directory."""
    public_dir = tmp_path / 'public'
    public_dir.mkdir()
    app = create_app(
        'testing',
        DATA_DIR=str(tmp_path / 'database'),
        PUBLIC_DIR=str(public_dir)
    )
    yield app
    close_app(app)


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def store(tmp_path):
    """An open record store outside of any Flask app."""
    record_store = RecordStore(str(tmp_path / 'store')).open()
    yield record_store
    record_store.close()


@pytest.fixture
def user_repo(store):
    return UserRepository(store)


@pytest.fixture
def reservation_repo(store):
    return ReservationRepository(store)


@pytest.fixture
def payment_repo(store):
    return PaymentRepository(store)


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def reservation_service(reservation_repo):
    return ReservationService(reservation_repo)


@pytest.fixture
def payment_service(payment_repo, reservation_service):
    return PaymentService(payment_repo, reservation_service)


@pytest.fixture
def stats_service(user_repo, reservation_repo, payment_repo):
    return StatsService(user_repo, reservation_repo, payment_repo)


@pytest.fixture
def pending_reservation(reservation_service):
    """A paid reservation still waiting for its payment."""
    return reservation_service.create_reservation(
        username='alice',
        game='Zelda',
        type='day',
        amount=3,
        email='alice@example.com'
    )


# Test data generators
def generate_reservation_data(**kwargs):
    """Generate reservation request data."""
    defaults = {
        'username': 'alice',
        'game': 'Zelda',
        'type': 'day',
        'amount': 3,
        'date': '2026-11-01',
        'email': 'alice@example.com'
    }
    defaults.update(kwargs)
    return defaults


def generate_capture_event(external_id, event_type='PAYMENT.CAPTURE.COMPLETED', **resource):
    """Generate a PayPal capture webhook payload."""
    resource.setdefault('id', external_id)
    return {
        'id': 'WH-TEST-0001',
        'event_type': event_type,
        'resource': resource
    }


@pytest.fixture
def reservation_data():
    return generate_reservation_data


@pytest.fixture
def capture_event():
    return generate_capture_event
