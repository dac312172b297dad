import logging

import pytest

from agency_site.dispatch import Dispatcher, process_submission
from agency_site.exceptions import ProviderError
from agency_site.models import (
    JobSeekerSubmission, EmployerSubmission,
    Sent, RejectedByValidation, DeliveryFailed, ServiceUnavailable,
)
from tests.conftest import FakeProvider


SENDER = 'Contact Form <event@expresni-prace.com>'
RECIPIENTS = ['expresni.prace@gmail.com']


@pytest.fixture
def job_seeker():
    return JobSeekerSubmission(
        full_name='Jana Nováková',
        phone_number='+420777123456',
        email='jana@example.com',
        suggestion='Line one\nLine <two>',
    )


@pytest.fixture
def employer():
    return EmployerSubmission(
        full_name='Petr Svoboda',
        phone_number='+420602111222',
        email='petr@firma.cz',
        company_name='Svoboda & syn',
        suggestion='We need 10 warehouse workers from March.',
    )


def make_dispatcher(provider=None):
    return Dispatcher(provider or FakeProvider(), SENDER, RECIPIENTS)


def test_job_seeker_message(job_seeker):
    message = make_dispatcher().build_message(job_seeker)

    assert message.subject == 'Job Application from Jana Nováková'
    assert message.reply_to == 'jana@example.com'
    assert message.sender == SENDER
    assert message.recipients == RECIPIENTS
    assert 'New Job Application' in message.html
    assert 'Looking for a Job' in message.html
    assert 'Company Name' not in message.html
    assert 'Line one<br>Line &lt;two&gt;' in message.html
    assert 'Phone Number: +420777123456' in message.text


def test_employer_message(employer):
    message = make_dispatcher().build_message(employer)

    assert message.subject == 'Personnel Request from Petr Svoboda (Svoboda & syn)'
    assert 'New Personnel Request' in message.html
    assert 'Request Personnel' in message.html
    assert '<strong>Company Name:</strong> Svoboda &amp; syn' in message.html
    assert 'Company Name: Svoboda & syn' in message.text


def test_message_is_deterministic(employer):
    dispatcher = make_dispatcher()
    assert dispatcher.build_message(employer) == dispatcher.build_message(employer)


def test_dispatch_sends_once(job_seeker):
    provider = FakeProvider(message_id='abc')

    outcome = make_dispatcher(provider).dispatch(job_seeker)

    assert outcome == Sent(message_id='abc')
    assert len(provider.sent) == 1


def test_dispatch_without_provider_id(job_seeker):
    outcome = make_dispatcher(FakeProvider(message_id=None)).dispatch(job_seeker)
    assert outcome == Sent(message_id=None)


def test_provider_failure_is_not_retried(job_seeker, failing_provider, caplog):
    with caplog.at_level(logging.ERROR, logger='agency_site.dispatch'):
        outcome = make_dispatcher(failing_provider).dispatch(job_seeker)

    assert outcome == DeliveryFailed()
    assert 'secret-internal-detail' not in outcome.reason
    assert len(failing_provider.sent) == 1
    assert 'secret-internal-detail' in caplog.text


def test_unexpected_provider_exception_becomes_delivery_failed(job_seeker, caplog):
    provider = FakeProvider(error=ConnectionError('socket reset'))

    with caplog.at_level(logging.ERROR, logger='agency_site.dispatch'):
        outcome = make_dispatcher(provider).dispatch(job_seeker)

    assert outcome == DeliveryFailed()
    assert len(provider.sent) == 1
    assert 'socket reset' in caplog.text


def test_process_rejects_before_sending(employer_payload):
    provider = FakeProvider()
    del employer_payload['companyName']

    outcome = process_submission(employer_payload, make_dispatcher(provider))

    assert isinstance(outcome, RejectedByValidation)
    assert 'companyName' in outcome.errors
    assert provider.sent == []


def test_process_without_dispatcher(job_seeker_payload):
    assert process_submission(job_seeker_payload, None) == ServiceUnavailable()


def test_process_sends_valid_payload(job_seeker_payload):
    provider = FakeProvider()

    outcome = process_submission(job_seeker_payload, make_dispatcher(provider))

    assert outcome == Sent(message_id='msg_123')
    assert 'Jana Nováková' in provider.sent[0].subject
    assert provider.sent[0].reply_to == 'jana@example.com'


def test_provider_error_fields():
    error = ProviderError('failed', status_code=500, detail='x')
    assert error.status_code == 500
    assert error.detail == 'x'
