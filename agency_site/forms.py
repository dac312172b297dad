# agency_site/forms.py

import email_validator
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField, TextAreaField, BooleanField, SubmitField, ValidationError
from wtforms.validators import Length

from agency_site.exceptions import InvalidSubmission
from agency_site.models import JobSeekerSubmission, EmployerSubmission


# Имена полей в JSON и в HTML-форме совпадают
TEXT_FIELDS = ('fullName', 'phoneNumber', 'email', 'companyName', 'suggestion')
FLAG_FIELDS = ('agreeToPrivacy',)

JSON_TYPE_NAMES = {
    list: 'array',
    str: 'string',
    int: 'number',
    float: 'number',
    bool: 'boolean',
    type(None): 'null',
}


def must_be_checked(form, field):
    if field.data is not True:
        raise ValidationError('You must agree to the Privacy Policy')


def valid_email(form, field):
    # Синтаксис адреса без DNS; служебные домены (.test, .local) допускаются
    try:
        email_validator.validate_email(
            field.data or '',
            check_deliverability=False,
            globally_deliverable=False,
        )
    except email_validator.EmailNotValidError as e:
        raise ValidationError('Please enter a valid email address') from e


# ---------------- Схема заявки (без Flask) ----------------

class ContactSchema(Form):
    full_name = StringField(
        'Full name',
        name='fullName',
        validators=[Length(min=2, message='Full name must be at least 2 characters')]
    )
    phone_number = StringField(
        'Phone number',
        name='phoneNumber',
        validators=[Length(min=9, message='Please enter a valid phone number')]
    )
    email = StringField(
        'E-mail',
        name='email',
        validators=[valid_email]
    )
    suggestion = TextAreaField(
        'Suggestion',
        name='suggestion',
        validators=[Length(min=10, message='Suggestion must be at least 10 characters')]
    )
    agree_to_privacy = BooleanField(
        'I agree to the Privacy Policy',
        name='agreeToPrivacy',
        validators=[must_be_checked]
    )

    form_type = None

    def field_errors(self):
        """Ошибки по именам полей как они приходят с клиента."""
        return {field.name: list(field.errors) for field in self if field.errors}


class JobSeekerSchema(ContactSchema):
    form_type = 'jobSeeker'

    def to_submission(self):
        return JobSeekerSubmission(
            full_name=self.full_name.data,
            phone_number=self.phone_number.data,
            email=self.email.data,
            suggestion=self.suggestion.data,
            agree_to_privacy=self.agree_to_privacy.data,
        )


class EmployerSchema(ContactSchema):
    company_name = StringField(
        'Company name',
        name='companyName',
        validators=[Length(min=2, message='Company name must be at least 2 characters')]
    )

    form_type = 'employer'

    def to_submission(self):
        return EmployerSubmission(
            full_name=self.full_name.data,
            phone_number=self.phone_number.data,
            email=self.email.data,
            company_name=self.company_name.data,
            suggestion=self.suggestion.data,
            agree_to_privacy=self.agree_to_privacy.data,
        )


# ---------------- HTML-формы (CSRF через Flask-WTF) ----------------

class JobSeekerForm(FlaskForm, JobSeekerSchema):
    submit = SubmitField('Send')


class EmployerForm(FlaskForm, EmployerSchema):
    submit = SubmitField('Send')


SCHEMAS = {
    JobSeekerSchema.form_type: JobSeekerSchema,
    EmployerSchema.form_type: EmployerSchema,
}
FORM_TYPES = {
    JobSeekerForm.form_type: JobSeekerForm,
    EmployerForm.form_type: EmployerForm,
}
DEFAULT_FORM_TYPE = JobSeekerForm.form_type


def unknown_form_type():
    expected = ' | '.join(f"'{name}'" for name in SCHEMAS)
    return InvalidSubmission({
        'formType': [f"Invalid discriminator value. Expected {expected}"]
    })


def _lookup(registry, form_type):
    form_cls = registry.get(form_type) if isinstance(form_type, str) else None
    if form_cls is None:
        raise unknown_form_type()
    return form_cls


def bind_form(form_type, formdata=None, **kwargs):
    """HTML-форма нужного типа. Неизвестный тип - ошибка валидации."""
    return _lookup(FORM_TYPES, form_type)(formdata=formdata, **kwargs)


def validate_form(form):
    """Проверяет все поля за один проход и возвращает типизированную заявку."""
    if not form.validate():
        raise InvalidSubmission(form.field_errors())
    return form.to_submission()


def _strict_formdata(raw):
    # JSON: текст только строкой, согласие только true.
    # Значение другого типа считается отсутствующим.
    data = MultiDict()
    for name in TEXT_FIELDS:
        value = raw.get(name)
        if isinstance(value, str):
            data.add(name, value)
    for name in FLAG_FIELDS:
        if raw.get(name) is True:
            data.add(name, 'y')
    return data


def validate_submission(raw, form_type=None):
    """Проверка на границе доверия (JSON API).

    ``raw`` - разобранное тело запроса. Лишние поля игнорируются,
    ``companyName`` в заявке соискателя тоже. Контекст Flask не нужен.
    """
    if not isinstance(raw, dict):
        received = JSON_TYPE_NAMES.get(type(raw), type(raw).__name__)
        raise InvalidSubmission({'formType': [f'Expected object, received {received}']})

    form_type = form_type or raw.get('formType')
    schema = _lookup(SCHEMAS, form_type)(formdata=_strict_formdata(raw))
    return validate_form(schema)
