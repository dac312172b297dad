import logging

from agency_site.exceptions import InvalidSubmission, DeliveryError
from agency_site.forms import validate_submission, validate_form
from agency_site.models import (
    OutgoingMessage, Sent, RejectedByValidation, DeliveryFailed, ServiceUnavailable,
)
from agency_site.utils import render_html_body, render_text_body

logger = logging.getLogger(__name__)


class Dispatcher:
    """Превращает проверенную заявку в письмо и отдаёт провайдеру.

    Одна попытка отправки на заявку, без повторов. Адреса отправителя
    и получателей берутся из настроек, не из заявки.
    """

    def __init__(self, provider, sender, recipients):
        self.provider = provider
        self.sender = sender
        self.recipients = list(recipients)

    @classmethod
    def from_config(cls, provider, config):
        return cls(provider, config['CONTACT_MAIL_FROM'], config['CONTACT_MAIL_TO'])

    def build_message(self, submission):
        return OutgoingMessage(
            sender=self.sender,
            recipients=list(self.recipients),
            subject=submission.subject,
            html=render_html_body(submission),
            text=render_text_body(submission),
            reply_to=submission.email,
        )

    def dispatch(self, submission):
        message = self.build_message(submission)
        try:
            message_id = self.provider.send(message)
        except DeliveryError as e:
            logger.error(
                f'❌ Письмо не отправлено ({submission.form_type}): {e} '
                f'| status={getattr(e, "status_code", None)} detail={getattr(e, "detail", None)}'
            )
            return DeliveryFailed()
        except Exception:
            logger.exception(f'💥 Сбой провайдера при отправке заявки {submission.form_type}')
            return DeliveryFailed()

        logger.info(f'📨 Заявка {submission.form_type} отправлена, id={message_id}')
        return Sent(message_id=message_id)


def _process(validate, dispatcher):
    if dispatcher is None:
        logger.error('⚠️ RESEND_API_KEY не задан - заявка не может быть отправлена')
        return ServiceUnavailable()

    try:
        submission = validate()
    except InvalidSubmission as e:
        logger.info(f'📝 Заявка отклонена валидацией: {sorted(e.errors)}')
        return RejectedByValidation(errors=e.errors)

    return dispatcher.dispatch(submission)


def process_submission(raw, dispatcher, form_type=None):
    """JSON-заявка: проверка, затем отправка.

    Возвращает Sent, RejectedByValidation, DeliveryFailed или
    ServiceUnavailable (dispatcher is None - нет ключа провайдера).
    """
    return _process(lambda: validate_submission(raw, form_type), dispatcher)


def process_form(form, dispatcher):
    """То же для HTML-формы, ошибки остаются в самой форме."""
    return _process(lambda: validate_form(form), dispatcher)
