import logging
from logging.handlers import RotatingFileHandler
import os
from flask import Flask, g, request, jsonify, flash, redirect, url_for, current_app
from flask_wtf.csrf import CSRFProtect, CSRFError
from werkzeug.exceptions import RequestEntityTooLarge

from agency_site.dispatch import Dispatcher
from agency_site.i18n import translate
from agency_site.mail import provider_from_config


csrf = CSRFProtect()


def current_locale():
    return g.get('locale') or current_app.config['DEFAULT_LANGUAGE']


def handle_large_body(e):
    if request.path.startswith('/api/'):
        return jsonify({'error': 'Request body too large'}), 413
    flash(translate(current_locale(), 'contact.form.tooLarge'), 'danger')
    return redirect(url_for('pages.index', locale=current_locale(), _anchor='contact'))


def handle_csrf_error(e):
    flash(translate(current_locale(), 'contact.form.csrf'), 'warning')
    return redirect(url_for('pages.index', locale=current_locale(), _anchor='contact'))


def setup_logging(app):
    if app.testing:
        return

    log_dir = app.config['LOG_DIR']
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    file_handler = RotatingFileHandler(os.path.join(log_dir, 'app.log'), maxBytes=500000, backupCount=3)
    file_handler.setFormatter(logging.Formatter('[%(asctime)s] %(levelname)s in %(module)s: %(message)s'))
    file_handler.setLevel(logging.INFO)

    app.logger.addHandler(file_handler)
    app.logger.setLevel(logging.INFO)


def create_app(config_object='agency_site.config.Config', provider=None):
    app = Flask(__name__)
    app.config.from_object(config_object)

    setup_logging(app)

    # 📮 Провайдер писем: ключ проверяем при старте, а не при первой заявке
    if provider is None:
        provider = provider_from_config(app.config)
    if not app.config.get('RESEND_API_KEY'):
        app.logger.error('⚠️ RESEND_API_KEY не задан - отправка заявок отключена')
    elif provider is not None:
        app.extensions['contact_dispatcher'] = Dispatcher.from_config(provider, app.config)

    csrf.init_app(app)

    app.register_error_handler(RequestEntityTooLarge, handle_large_body)
    app.register_error_handler(CSRFError, handle_csrf_error)

    @app.context_processor
    def inject_i18n():
        locale = current_locale()
        return {
            'locale': locale,
            'languages': app.config['LANGUAGES'],
            't': lambda key: translate(locale, key),
        }

    # Регистрация блюпринтов
    from agency_site.routes.contact import contact_bp
    from agency_site.routes.pages import pages_bp

    csrf.exempt(contact_bp)
    app.register_blueprint(contact_bp, url_prefix='/api')
    app.register_blueprint(pages_bp)

    app.logger.info('📦 Приложение запущено')
    return app
