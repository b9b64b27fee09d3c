"""
CSV Import: Load a question bank kept in a spreadsheet.

Expected columns (header names are case-insensitive):

    question | a | b | c | d | answer | explanation

Only "question" is required. Empty option cells are dropped, so a row
with two filled options becomes a two-option question.
"""

from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .bulk_parser import answer_letter_to_index
from .errors import ConfigError, NoQuestionsFound
from .models import Question, QuestionType

OPTION_COLUMNS = ['a', 'b', 'c', 'd']


def _cell(row: pd.Series, column: Optional[str]) -> str:
    if column is None:
        return ''
    value = row[column]
    if pd.isna(value):
        return ''
    return str(value).strip()


class CSVQuestionImporter:
    """
    Read multiple-choice questions from a CSV export.
    """

    def __init__(self, csv_path: str):
        """
        Args:
            csv_path: Path to the CSV file

        Raises:
            ConfigError: If the file cannot be read or has no question column
        """
        self.csv_path = csv_path
        try:
            self.df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, na_values=[''])
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            raise ConfigError(f"Could not read question bank {Path(csv_path).name}: {e}") from e

        self.columns = self._find_columns()
        if 'question' not in self.columns:
            raise ConfigError(f"{Path(csv_path).name} has no 'question' column")

    def _find_columns(self) -> Dict[str, str]:
        """
        Map normalised header names to the actual column labels.

        Returns:
            Example: {'question': 'Question', 'a': 'A', 'answer': ' Answer '}
        """
        columns = {}
        for col_name in self.df.columns:
            key = str(col_name).strip().lower()
            if key not in columns:
                columns[key] = col_name
        return columns

    def get_questions(self, limit: Optional[int] = None) -> List[Question]:
        """
        Build questions from the rows, in file order.

        Args:
            limit: Optional maximum number of rows to read

        Raises:
            NoQuestionsFound: If no row has question text
        """
        questions = []
        df_subset = self.df.head(limit) if limit else self.df

        for _, row in df_subset.iterrows():
            text = _cell(row, self.columns['question'])
            if not text:
                continue

            options = [_cell(row, self.columns.get(letter)) for letter in OPTION_COLUMNS]
            options = [opt for opt in options if opt]

            questions.append(Question.create(
                text=text,
                options=options,
                correct_answer=answer_letter_to_index(_cell(row, self.columns.get('answer'))),
                explanation=_cell(row, self.columns.get('explanation')),
                type=QuestionType.MULTIPLE_CHOICE,
            ))

        if not questions:
            raise NoQuestionsFound(f"No questions found in {Path(self.csv_path).name}")
        return questions
