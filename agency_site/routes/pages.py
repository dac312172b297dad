from flask import (
    Blueprint, render_template, redirect,
    url_for, request, flash, current_app, abort, g, jsonify
)

from agency_site.dispatch import process_form
from agency_site.exceptions import InvalidSubmission
from agency_site.forms import bind_form, FORM_TYPES, DEFAULT_FORM_TYPE
from agency_site.i18n import SECTIONS, VACANCIES, translate
from agency_site.models import Sent, RejectedByValidation
from agency_site.routes.contact import get_dispatcher


pages_bp = Blueprint('pages', __name__)


@pages_bp.url_value_preprocessor
def pull_locale(endpoint, values):
    if values and 'locale' in values:
        g.locale = values['locale']
        if g.locale not in current_app.config['LANGUAGES']:
            abort(404)


def selected_form_type():
    form_type = request.args.get('form')
    return form_type if form_type in FORM_TYPES else DEFAULT_FORM_TYPE


def render_landing(form, status=200):
    return render_template(
        'index.html',
        form=form,
        form_type=form.form_type,
        form_types=list(FORM_TYPES),
        sections=SECTIONS,
        vacancies=VACANCIES,
    ), status


@pages_bp.route('/')
def root():
    languages = list(current_app.config['LANGUAGES'])
    locale = request.accept_languages.best_match(languages) or current_app.config['DEFAULT_LANGUAGE']
    return redirect(url_for('pages.index', locale=locale))


@pages_bp.route('/<locale>/')
def index(locale):
    # Смена типа формы = новая пустая форма, ничего не переносим
    form = bind_form(selected_form_type())
    return render_landing(form)


@pages_bp.route('/<locale>/contact', methods=['POST'])
def contact(locale):
    try:
        form = bind_form(request.form.get('formType'), formdata=request.form)
    except InvalidSubmission:
        flash(translate(locale, 'contact.form.error'), 'danger')
        return redirect(url_for('pages.index', locale=locale, _anchor='contact'))

    outcome = process_form(form, get_dispatcher())

    if isinstance(outcome, Sent):
        flash(translate(locale, 'contact.form.success'), 'success')
        return redirect(url_for('pages.index', locale=locale, form=form.form_type, _anchor='contact'))

    if isinstance(outcome, RejectedByValidation):
        return render_landing(form, 400)

    # DeliveryFailed / ServiceUnavailable - подробности только в логе
    flash(translate(locale, 'contact.form.error'), 'danger')
    return render_landing(form, 500)


@pages_bp.route('/healthz')
def healthz():
    return jsonify({
        'status': 'ok',
        'mail_configured': get_dispatcher() is not None,
    })
