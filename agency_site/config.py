import os

basedir = os.path.abspath(os.path.dirname(__file__))


def _split_list(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'

    # Без ключа отправка писем отключена, форма отвечает 500
    RESEND_API_KEY = os.environ.get('RESEND_API_KEY')
    RESEND_API_URL = os.environ.get('RESEND_API_URL') or 'https://api.resend.com'

    CONTACT_MAIL_FROM = (
        os.environ.get('CONTACT_MAIL_FROM') or
        'Contact Form <event@expresni-prace.com>'
    )
    CONTACT_MAIL_TO = _split_list(
        os.environ.get('CONTACT_MAIL_TO') or 'expresni.prace@gmail.com'
    )
    MAIL_TIMEOUT = float(os.environ.get('MAIL_TIMEOUT') or 10)

    LANGUAGES = {
        'en': 'EN',
        'cs': 'CZ',
        'ru': 'RU',
    }
    DEFAULT_LANGUAGE = os.environ.get('DEFAULT_LANGUAGE') or 'cs'

    # Контактная форма - только текст, 64 КБ хватает с запасом
    MAX_CONTENT_LENGTH = 64 * 1024
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(basedir, '..', 'logs')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    RESEND_API_KEY = 'test-key'
    WTF_CSRF_ENABLED = False
