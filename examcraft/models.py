"""
Models: Question records and the exam configuration they belong to.

ExamConfig is the single aggregate edited during a session and read
wholesale when the document is assembled.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import ConfigError


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = 'multiple-choice'
    TRUE_FALSE = 'true-false'
    SHORT_ANSWER = 'short-answer'


def new_question_id() -> str:
    """Opaque unique id for a freshly created question."""
    return uuid.uuid4().hex


@dataclass
class Question:
    """
    One assessable item.

    Attributes:
        id: Opaque unique identifier assigned at creation
        text: Question prompt (non-empty)
        options: Ordered answer strings, lettered A, B, C... when rendered
        correct_answer: Zero-based index into options
        explanation: Optional free text, empty when absent
        type: Question kind; bulk imports are always multiple-choice
    """
    id: str
    text: str
    options: List[str] = field(default_factory=list)
    correct_answer: int = 0
    explanation: str = ''
    type: QuestionType = QuestionType.MULTIPLE_CHOICE

    @classmethod
    def create(
        cls,
        text: str,
        options: Optional[List[str]] = None,
        correct_answer: Optional[int] = None,
        explanation: Optional[str] = None,
        type: QuestionType = QuestionType.MULTIPLE_CHOICE,
    ) -> 'Question':
        """
        Build a question with a fresh id and all defaults applied.

        An index outside the options falls back to 0 so the correct
        answer always points at an existing option.
        """
        options = list(options or [])
        index = correct_answer or 0
        if options and not 0 <= index < len(options):
            index = 0
        return cls(
            id=new_question_id(),
            text=text,
            options=options,
            correct_answer=index,
            explanation=explanation or '',
            type=QuestionType(type),
        )

    @property
    def correct_option(self) -> Optional[str]:
        if not self.options:
            return None
        return self.options[self.correct_answer]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'text': self.text,
            'options': list(self.options),
            'correct_answer': self.correct_answer,
            'explanation': self.explanation,
            'type': self.type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Question':
        """Build a question from a config dict; the id is generated when missing."""
        if not str(data.get('text', '')).strip():
            raise ConfigError('Question text must not be empty')
        try:
            qtype = QuestionType(data.get('type', QuestionType.MULTIPLE_CHOICE.value))
        except ValueError:
            raise ConfigError(f"Unknown question type: {data.get('type')}")

        question = cls.create(
            text=str(data['text']),
            options=[str(opt) for opt in data.get('options', [])],
            correct_answer=int(data.get('correct_answer', 0)),
            explanation=str(data.get('explanation', '')),
            type=qtype,
        )
        if data.get('id'):
            question.id = str(data['id'])
        return question


@dataclass
class ExamConfig:
    """
    Everything needed to render one exam document.

    Booleans are passed through to the template as "true"/"false" text;
    they have no effect while building the document.
    """
    title: str = ''
    subject: str = ''
    duration: str = ''
    instructions: str = ''
    questions_url: str = ''
    answers_url: str = ''
    use_custom_urls: bool = False
    template: str = 'demo'
    show_timer: bool = True
    allow_navigation: bool = True
    randomize_questions: bool = False
    theme: str = 'light'
    questions: List[Question] = field(default_factory=list)

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExamConfig':
        """
        Build a configuration from an EXAM_CONFIG dict.

        Args:
            data: Mapping of field name to value; 'questions' holds a list
                  of question dicts (see Question.from_dict)

        Returns:
            New ExamConfig

        Raises:
            ConfigError: On unknown keys or malformed questions
        """
        known = set(cls.field_names())
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values = {key: value for key, value in data.items() if key != 'questions'}
        config = cls(**values)
        config.questions = [Question.from_dict(q) for q in data.get('questions', [])]
        return config

    def to_dict(self) -> Dict[str, Any]:
        data = {name: getattr(self, name) for name in self.field_names() if name != 'questions'}
        data['questions'] = [q.to_dict() for q in self.questions]
        return data
