"""
Tests for examcraft.csv_import
"""
import pytest

from examcraft.csv_import import CSVQuestionImporter
from examcraft.errors import ConfigError, NoQuestionsFound


def write_csv(tmp_path, content):
    path = tmp_path / "bank.csv"
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_reads_questions_in_order(tmp_path):
    path = write_csv(tmp_path, (
        "Question,A,B,C,D,Answer,Explanation\n"
        "What is 2 + 2?,3,4,5,6,B,2 + 2 equals 4\n"
        "Capital of France?,Berlin,Paris,Rome,Madrid,b,\n"
    ))

    questions = CSVQuestionImporter(path).get_questions()

    assert [q.text for q in questions] == ["What is 2 + 2?", "Capital of France?"]
    assert questions[0].options == ["3", "4", "5", "6"]
    assert questions[0].correct_answer == 1
    assert questions[0].explanation == "2 + 2 equals 4"
    assert questions[1].correct_answer == 1
    assert questions[1].explanation == ""


def test_headers_are_case_and_space_insensitive(tmp_path):
    path = write_csv(tmp_path, " QUESTION , a , b \nTrue?,Yes,No\n")

    questions = CSVQuestionImporter(path).get_questions()

    assert questions[0].options == ["Yes", "No"]
    assert questions[0].correct_answer == 0


def test_blank_rows_and_cells_are_skipped(tmp_path):
    path = write_csv(tmp_path, (
        "question,a,b,c,d,answer\n"
        ",x,y,,,A\n"
        "Only two,x,,y,,D\n"
    ))

    questions = CSVQuestionImporter(path).get_questions()

    assert len(questions) == 1
    assert questions[0].options == ["x", "y"]
    assert questions[0].correct_answer == 0  # D is past the two options


def test_numeric_looking_cells_stay_text(tmp_path):
    path = write_csv(tmp_path, "question,a,b\nPick,007,1.50\n")

    questions = CSVQuestionImporter(path).get_questions()

    assert questions[0].options == ["007", "1.50"]


def test_limit(tmp_path):
    path = write_csv(tmp_path, "question\nOne\nTwo\nThree\n")

    assert len(CSVQuestionImporter(path).get_questions(limit=2)) == 2


def test_missing_question_column(tmp_path):
    path = write_csv(tmp_path, "prompt,a,b\nx,1,2\n")

    with pytest.raises(ConfigError):
        CSVQuestionImporter(path)


def test_no_rows(tmp_path):
    path = write_csv(tmp_path, "question,a,b\n")

    with pytest.raises(NoQuestionsFound):
        CSVQuestionImporter(path).get_questions()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        CSVQuestionImporter(str(tmp_path / "nope.csv"))
