from dataclasses import dataclass, field
from typing import Dict, List, Optional


# ---------------- Заявки (тип по значению formType) ----------------

@dataclass(frozen=True)
class JobSeekerSubmission:
    full_name: str
    phone_number: str
    email: str
    suggestion: str
    agree_to_privacy: bool = True

    form_type = 'jobSeeker'
    label = 'Looking for a Job'
    heading = 'New Job Application'
    company_name = None

    @property
    def subject(self):
        return f'Job Application from {self.full_name}'


@dataclass(frozen=True)
class EmployerSubmission:
    full_name: str
    phone_number: str
    email: str
    company_name: str
    suggestion: str
    agree_to_privacy: bool = True

    form_type = 'employer'
    label = 'Request Personnel'
    heading = 'New Personnel Request'

    @property
    def subject(self):
        return f'Personnel Request from {self.full_name} ({self.company_name})'


# ---------------- Письмо для провайдера ----------------

@dataclass(frozen=True)
class OutgoingMessage:
    sender: str
    recipients: List[str]
    subject: str
    html: str
    text: str
    reply_to: str

    def to_payload(self) -> Dict[str, object]:
        return {
            'from': self.sender,
            'to': list(self.recipients),
            'subject': self.subject,
            'html': self.html,
            'text': self.text,
            'reply_to': self.reply_to,
        }


# ---------------- Итог обработки заявки ----------------

@dataclass(frozen=True)
class Sent:
    message_id: Optional[str] = None


@dataclass(frozen=True)
class RejectedByValidation:
    errors: Dict[str, List[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class DeliveryFailed:
    reason: str = 'Failed to send email'


@dataclass(frozen=True)
class ServiceUnavailable:
    reason: str = 'Email service not configured. Please contact administrator.'
