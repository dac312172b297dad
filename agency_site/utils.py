from markupsafe import Markup, escape

from agency_site.models import JobSeekerSubmission, EmployerSubmission


def nl2br(text):
    """Переводы строк -> <br>, остальной текст экранируется."""
    lines = text.replace('\r\n', '\n').split('\n')
    return Markup('<br>').join(escape(line) for line in lines)


def submission_rows(submission):
    """Пары (подпись, значение) для тела письма, в порядке формы."""
    rows = [
        ('Form Type', submission.label),
        ('Full Name', submission.full_name),
        ('Phone Number', submission.phone_number),
        ('Email', submission.email),
    ]
    if isinstance(submission, EmployerSubmission):
        rows.append(('Company Name', submission.company_name))
    elif not isinstance(submission, JobSeekerSubmission):
        raise TypeError(f'Unknown submission type: {type(submission).__name__}')
    return rows


def render_html_body(submission):
    rows = ''.join(
        f'<p><strong>{escape(label)}:</strong> {escape(value)}</p>'
        for label, value in submission_rows(submission)
    )
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f'<h2 style="color: #333;">{escape(submission.heading)}</h2>'
        '<div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;">'
        f'{rows}'
        '<p><strong>Suggestion:</strong></p>'
        '<div style="background-color: white; padding: 15px; border-radius: 4px; margin-top: 10px;">'
        f'{nl2br(submission.suggestion)}'
        '</div>'
        '</div>'
        '<p style="color: #666; font-size: 14px;">'
        "This email was sent from your website's contact form."
        '</p>'
        '</div>'
    )


def render_text_body(submission):
    lines = [submission.heading, '']
    lines += [f'{label}: {value}' for label, value in submission_rows(submission)]
    lines += ['', 'Suggestion:', submission.suggestion]
    return '\n'.join(lines)
