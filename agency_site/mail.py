import requests

from agency_site.exceptions import ConfigurationError, ProviderError


class EmailProvider:
    """Минимальный интерфейс провайдера: send(message) -> id письма или None."""

    def send(self, message):
        raise NotImplementedError


class ResendProvider(EmailProvider):
    """Отправка через HTTP API Resend (POST /emails)."""

    def __init__(self, api_key, base_url='https://api.resend.com', timeout=10, session=None):
        if not api_key:
            raise ConfigurationError('RESEND_API_KEY is not set')
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, message):
        try:
            response = self.session.post(
                f'{self.base_url}/emails',
                json=message.to_payload(),
                headers={
                    'Authorization': f'Bearer {self.api_key}',
                    'Content-Type': 'application/json',
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f'Resend request failed: {e}') from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok:
            raise ProviderError(
                f"Resend error {response.status_code}: {body.get('name', 'unknown')}",
                status_code=response.status_code,
                detail=body.get('message') or response.text,
            )

        return body.get('id')


def provider_from_config(config):
    """Провайдер по настройкам приложения, None если ключ не задан."""
    if not config.get('RESEND_API_KEY'):
        return None
    return ResendProvider(
        config['RESEND_API_KEY'],
        base_url=config.get('RESEND_API_URL', 'https://api.resend.com'),
        timeout=config.get('MAIL_TIMEOUT', 10),
    )
