"""
Errors: Recoverable failures surfaced to the user as notifications.

None of these abort the session; the configuration is left as it was
before the failing operation.
"""


class ExamCraftError(Exception):
    """Base class for all user-visible exam building errors."""


class MissingRequiredFieldError(ExamCraftError):
    """Title or subject is empty at generation time."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field is empty: {field}")


class NoQuestionsFound(ExamCraftError):
    """A bulk import produced zero questions."""

    def __init__(self, message: str = 'No valid questions found. Please check the format.'):
        super().__init__(message)


class TemplateError(ExamCraftError):
    """Base class for template problems."""


class InvalidTemplateError(TemplateError):
    """Template text cannot receive the theme stylesheet."""


class TemplateFetchError(TemplateError):
    """Template text could not be read from storage or the network."""


class ConfigError(ExamCraftError):
    """Configuration value or config module is invalid."""


class GenerationInProgressError(ExamCraftError):
    """A generation was requested while another one is still pending."""


class NothingGeneratedError(ExamCraftError):
    """Export or preview was requested before any HTML was generated."""

    def __init__(self, message: str = 'Please generate HTML first'):
        super().__init__(message)
