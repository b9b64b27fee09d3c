"""
Session: One editing session over a single exam configuration.

The session owns the ExamConfig. Questions are added by hand or through a
bulk import, removed by id, and the document is generated on demand from
the selected template. Failed operations leave the configuration as it was.
"""

import inspect
from pathlib import Path
from typing import List, Optional, Union

from .bulk_parser import BulkQuestionParser, load_bulk_file
from .errors import (
    ConfigError,
    GenerationInProgressError,
    NoQuestionsFound,
    NothingGeneratedError,
)
from .exporter import export_filename, save_html
from .html_generator import assemble, check_required_fields
from .models import ExamConfig, Question, QuestionType
from .template_store import RemoteTemplateStore, TemplateStore, is_known_template
from .themes import is_known_theme


class ExamSession:
    """
    Args:
        config: Starting configuration (a blank one when omitted)
        store: Where templates are read from
    """

    def __init__(
        self,
        config: Optional[ExamConfig] = None,
        store: Union[TemplateStore, RemoteTemplateStore, None] = None,
    ):
        self.config = config or ExamConfig()
        self.store = store or TemplateStore()
        self.bulk_text = ''
        self.generated_html = ''
        self.last_import: Optional[BulkQuestionParser] = None
        self._generating = False

    @property
    def is_generating(self) -> bool:
        return self._generating

    def update(self, **fields) -> None:
        """
        Set configuration fields by name.

        Raises:
            ConfigError: On an unknown field, template or theme
        """
        known = set(ExamConfig.field_names()) - {'questions'}
        for name in fields:
            if name not in known:
                raise ConfigError(f"Unknown config field: {name}")
        if 'template' in fields and not is_known_template(fields['template']):
            raise ConfigError(f"Unknown template: {fields['template']}")
        if 'theme' in fields and not is_known_theme(fields['theme']):
            raise ConfigError(f"Unknown theme: {fields['theme']}")

        for name, value in fields.items():
            setattr(self.config, name, value)

    def add_question(
        self,
        text: str,
        options: List[str],
        correct_answer: int = 0,
        explanation: str = '',
        type: QuestionType = QuestionType.MULTIPLE_CHOICE,
    ) -> Question:
        """
        Add a single hand-written question.

        Raises:
            ConfigError: If the prompt or any option is blank
        """
        if not text or not text.strip() or not all(opt.strip() for opt in options):
            raise ConfigError('Please fill in all question fields')

        question = Question.create(
            text=text,
            options=options,
            correct_answer=correct_answer,
            explanation=explanation,
            type=type,
        )
        self.config.questions.append(question)
        return question

    def remove_question(self, question_id: str) -> bool:
        """Remove a question by id. Returns False if no question had that id."""
        before = len(self.config.questions)
        self.config.questions = [q for q in self.config.questions if q.id != question_id]
        return len(self.config.questions) != before

    def load_bulk_file(self, path: str) -> str:
        """Load a file into the bulk text buffer. Does not import it."""
        self.bulk_text = load_bulk_file(path)
        return self.bulk_text

    def import_bulk(self) -> List[Question]:
        """
        Parse the bulk text buffer and append the questions.

        Returns:
            The newly added questions

        Raises:
            NoQuestionsFound: If the buffer is empty or has no question
        """
        if not self.bulk_text.strip():
            raise NoQuestionsFound('Please enter questions in the text area')

        parser = BulkQuestionParser()
        questions = parser.parse(self.bulk_text)

        self.config.questions.extend(questions)
        self.last_import = parser
        self.bulk_text = ''
        return questions

    async def _fetch_template(self) -> str:
        result = self.store.fetch(self.config.template)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def generate(self) -> str:
        """
        Fetch the selected template and assemble the exam document.

        Raises:
            GenerationInProgressError: If a generation is already pending
            MissingRequiredFieldError, TemplateError: See html_generator and
                template_store
        """
        if self._generating:
            raise GenerationInProgressError('HTML generation is already in progress')

        check_required_fields(self.config)

        self._generating = True
        try:
            template_html = await self._fetch_template()
            html = assemble(self.config, template_html)
        finally:
            self._generating = False

        self.generated_html = html
        return html

    def export_filename(self) -> str:
        if not self.generated_html:
            raise NothingGeneratedError()
        return export_filename(self.config.title)

    def download(self, output_dir: str) -> Path:
        """
        Save the generated document.

        Raises:
            NothingGeneratedError: If generate() has not succeeded yet
        """
        if not self.generated_html:
            raise NothingGeneratedError()
        return save_html(self.generated_html, output_dir, self.config.title)
