"""
Bulk Parser: Turn pasted or uploaded text into question records.

Text format (one item per line, blank lines ignored):

    Q: What is 2 + 2?
    A) 3
    B) 4
    C) 5
    D) 6
    Answer: B
    Explanation: 2 + 2 equals 4

- "Q:" or "Question:" starts a new question
- "A)".."D)" fill the options in the order they appear
- "Answer:" or "Correct:" takes a letter A-D (anything else means A)
- "Explanation:" sets the explanation
- Every other line is skipped without complaint
"""

import re
from typing import List, Optional

from .errors import NoQuestionsFound
from .models import Question, QuestionType

MAX_OPTIONS = 4

QUESTION_PREFIX = re.compile(r'^(Q:|Question:)\s*')
OPTION_PREFIX = re.compile(r'^[A-D]\)\s*')
ANSWER_PREFIX = re.compile(r'^(Answer:|Correct:)\s*')
EXPLANATION_PREFIX = re.compile(r'^Explanation:\s*')

ANSWER_LETTERS = {'A': 0, 'B': 1, 'C': 2, 'D': 3}


def answer_letter_to_index(letter: str) -> int:
    """
    Map an answer letter to an option index.

    Examples:
        "B" → 1
        "c" → 2
        "Z" → 0
        "AB" → 0
    """
    return ANSWER_LETTERS.get(letter.strip().upper(), 0)


class BulkQuestionParser:
    """
    Single-pass line parser with one question under construction.

    Besides the questions, the parser keeps count of what it skipped so a
    caller can tell the user about lines that were not understood.
    """

    def __init__(self):
        self.questions: List[Question] = []
        self.skipped_lines: List[str] = []
        self.extra_options: int = 0
        self._reset_current()

    def _reset_current(self) -> None:
        self._text: Optional[str] = None
        self._options: List[str] = []
        self._correct: int = 0
        self._explanation: str = ''

    def _finalize(self) -> None:
        """Append the question under construction if it has a prompt."""
        if self._text:
            self.questions.append(Question.create(
                text=self._text,
                options=self._options,
                correct_answer=self._correct,
                explanation=self._explanation,
                type=QuestionType.MULTIPLE_CHOICE,
            ))
        self._reset_current()

    def _feed(self, line: str) -> None:
        if QUESTION_PREFIX.match(line):
            self._finalize()
            self._text = QUESTION_PREFIX.sub('', line, count=1)
        elif OPTION_PREFIX.match(line):
            if self._text is None:
                # Option with no question to attach to
                self.skipped_lines.append(line)
            elif len(self._options) >= MAX_OPTIONS:
                self.extra_options += 1
            else:
                self._options.append(OPTION_PREFIX.sub('', line, count=1).strip())
        elif ANSWER_PREFIX.match(line):
            self._correct = answer_letter_to_index(ANSWER_PREFIX.sub('', line, count=1))
        elif EXPLANATION_PREFIX.match(line):
            self._explanation = EXPLANATION_PREFIX.sub('', line, count=1)
        else:
            self.skipped_lines.append(line)

    def parse(self, raw_text: str) -> List[Question]:
        """
        Parse bulk text into questions, in source order.

        Args:
            raw_text: Free-form text in the bulk format

        Returns:
            Questions parsed from this text

        Raises:
            NoQuestionsFound: If the text contains no question
        """
        self.questions = []
        self.skipped_lines = []
        self.extra_options = 0
        self._reset_current()

        lines = [line.strip() for line in raw_text.splitlines()]
        for line in lines:
            if line:
                self._feed(line)
        self._finalize()

        if not self.questions:
            raise NoQuestionsFound()
        return list(self.questions)


def parse_bulk_questions(raw_text: str) -> List[Question]:
    """Parse bulk text with a fresh parser. See BulkQuestionParser.parse."""
    return BulkQuestionParser().parse(raw_text)


def load_bulk_file(path: str) -> str:
    """
    Read a bulk question file into text without parsing it.

    Parsing is a separate step so the text can be reviewed first.
    """
    with open(path, 'r', encoding='utf-8-sig') as f:
        return f.read()
