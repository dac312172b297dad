class ContactError(Exception):
    """Base class for failures of the contact submission pipeline."""


class InvalidSubmission(ContactError):
    """The payload broke one or more field constraints.

    ``errors`` maps the wire field name to its messages, so the caller can
    show one message per offending field.
    """

    def __init__(self, errors):
        super().__init__('Invalid form data')
        self.errors = errors


class ConfigurationError(ContactError):
    """The email provider credential is missing."""


class DeliveryError(ContactError):
    """The provider did not accept or deliver the message."""


class ProviderError(DeliveryError):
    def __init__(self, message, status_code=None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
