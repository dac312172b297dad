import pytest

from agency_site import create_app
from agency_site.config import TestingConfig
from agency_site.exceptions import ProviderError
from agency_site.mail import EmailProvider


class FakeProvider(EmailProvider):
    def __init__(self, message_id='msg_123', error=None):
        self.message_id = message_id
        self.error = error
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        if self.error is not None:
            raise self.error
        return self.message_id


class NoKeyConfig(TestingConfig):
    RESEND_API_KEY = None


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=ProviderError(
        'Resend error 422: validation_error',
        status_code=422,
        detail='The `to` field is invalid. secret-internal-detail',
    ))


@pytest.fixture
def app(provider):
    return create_app(TestingConfig, provider=provider)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def job_seeker_payload():
    return {
        'formType': 'jobSeeker',
        'fullName': 'Jana Nováková',
        'phoneNumber': '+420777123456',
        'email': 'jana@example.com',
        'suggestion': 'I am looking for warehouse work in Prague.',
        'agreeToPrivacy': True,
    }


@pytest.fixture
def employer_payload():
    return {
        'formType': 'employer',
        'fullName': 'Petr Svoboda',
        'phoneNumber': '+420602111222',
        'email': 'petr@firma.cz',
        'companyName': 'Svoboda Logistics',
        'suggestion': 'We need 10 warehouse workers from March.',
        'agreeToPrivacy': True,
    }
