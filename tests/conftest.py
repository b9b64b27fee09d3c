import pytest
import sys
from pathlib import Path

# Add the repo root to sys.path so examcraft imports without installing
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from examcraft.models import ExamConfig, Question  # noqa: E402


TEMPLATES_DIR = ROOT_PATH / "templates"


# Common test fixtures
@pytest.fixture
def sample_bulk_text():
    """Two well-formed questions with some noise in between."""
    return """
Q: What is 2 + 2?
A) 3
B) 4
C) 5
D) 6
Answer: B
Explanation: 2 + 2 equals 4

This line is not part of the format.

Question: Which planet is known as the Red Planet?
A) Venus
B) Jupiter
C) Mars
D) Saturn
Correct: C
"""


@pytest.fixture
def minimal_template():
    """Template using every recognised placeholder once."""
    return (
        "<html><head><title>{{EXAM_TITLE}}</title></head><body data-theme=\"{{THEME}}\">"
        "<h1>{{EXAM_TITLE}}</h1><p>{{SUBJECT}}</p><p>{{DURATION}}</p><p>{{INSTRUCTIONS}}</p>"
        "<a href=\"{{QUESTIONS_URL}}\"></a><a href=\"{{ANSWERS_URL}}\"></a>"
        "<span>{{QUESTIONS_COUNT}}</span>{{QUESTIONS_HTML}}"
        "<script>const s = {{SHOW_TIMER}}, n = {{ALLOW_NAVIGATION}}, r = {{RANDOMIZE_QUESTIONS}};</script>"
        "</body></html>"
    )


@pytest.fixture
def sample_config():
    """Configuration with title, subject and two questions."""
    return ExamConfig(
        title="Algebra Midterm",
        subject="Mathematics",
        duration="60 minutes",
        instructions="Answer all questions.",
        questions=[
            Question.create("What is 2 + 2?", ["3", "4", "5", "6"], 1, "2 + 2 equals 4"),
            Question.create("What is 3 * 3?", ["6", "9"], 1),
        ],
    )


@pytest.fixture
def templates_dir():
    return TEMPLATES_DIR
