from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import RequestEntityTooLarge

from agency_site.dispatch import process_submission
from agency_site.models import Sent, RejectedByValidation, DeliveryFailed, ServiceUnavailable


contact_bp = Blueprint('contact', __name__)


def get_dispatcher():
    """Диспетчер приложения, None если ключ провайдера не задан."""
    if not current_app.config.get('RESEND_API_KEY'):
        return None
    return current_app.extensions.get('contact_dispatcher')


def outcome_response(outcome):
    if isinstance(outcome, Sent):
        body = {'message': 'Email sent successfully'}
        if outcome.message_id is not None:
            body['id'] = outcome.message_id
        return jsonify(body), 200
    if isinstance(outcome, RejectedByValidation):
        return jsonify({'error': 'Invalid form data', 'details': outcome.errors}), 400
    if isinstance(outcome, (DeliveryFailed, ServiceUnavailable)):
        return jsonify({'error': outcome.reason}), 500
    raise TypeError(f'Unknown submission outcome: {outcome!r}')


# Приём заявки с сайта
@contact_bp.route('/contact', methods=['POST'])
def submit():
    dispatcher = get_dispatcher()
    if dispatcher is None:
        current_app.logger.error('⚠️ RESEND_API_KEY не задан, заявка отклонена')
        return outcome_response(ServiceUnavailable())

    try:
        payload = request.get_json(force=True)
        outcome = process_submission(payload, dispatcher)
        return outcome_response(outcome)
    except RequestEntityTooLarge:
        raise
    except Exception:
        current_app.logger.exception('💥 Ошибка обработки контактной формы')
        return jsonify({'error': 'Internal server error'}), 500
