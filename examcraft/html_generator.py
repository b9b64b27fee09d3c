"""
HTML Generator: Fill an exam template with the configuration.

Takes a template's raw HTML and an ExamConfig, then:
1. Renders the question list to HTML
2. Replaces {{PLACEHOLDER}} tokens with configuration values
3. Injects the theme stylesheet before </head>
"""

import re
from typing import Dict, List

from bs4 import BeautifulSoup

from .errors import InvalidTemplateError, MissingRequiredFieldError
from .models import ExamConfig, Question
from .themes import get_theme_styles

NO_QUESTIONS_HTML = '<p>No questions added yet. Add questions to the exam before sharing it.</p>'

PLACEHOLDER_PATTERN = re.compile(r'\{\{([A-Z_]+)\}\}')
HEAD_CLOSE_PATTERN = re.compile(r'</head\s*>', re.IGNORECASE)

PLACEHOLDERS = (
    'EXAM_TITLE',
    'SUBJECT',
    'DURATION',
    'INSTRUCTIONS',
    'QUESTIONS_URL',
    'ANSWERS_URL',
    'QUESTIONS_HTML',
    'QUESTIONS_COUNT',
    'SHOW_TIMER',
    'ALLOW_NAVIGATION',
    'RANDOMIZE_QUESTIONS',
    'THEME',
)


def option_letter(index: int) -> str:
    """0 → "A", 1 → "B", ..."""
    return chr(ord('A') + index)


def _question_div(soup: BeautifulSoup, question: Question, number: int):
    container = soup.new_tag('div', attrs={'class': 'question-container', 'data-question': str(number)})

    title = soup.new_tag('h3', attrs={'class': 'question-title'})
    title.string = f"Question {number}"
    container.append(title)

    text = soup.new_tag('p', attrs={'class': 'question-text'})
    text.string = question.text
    container.append(text)

    options = soup.new_tag('div', attrs={'class': 'options-container'})
    for opt_idx, option in enumerate(question.options):
        label = soup.new_tag('label', attrs={'class': 'option-label'})

        attrs = {'type': 'radio', 'name': f"question_{number}", 'value': str(opt_idx)}
        if opt_idx == question.correct_answer:
            attrs['data-correct'] = 'true'
        label.append(soup.new_tag('input', attrs=attrs))

        option_text = soup.new_tag('span', attrs={'class': 'option-text'})
        option_text.string = f"{option_letter(opt_idx)}. {option}"
        label.append(option_text)

        options.append(label)
    container.append(options)

    if question.explanation:
        # Shown by the template's own script after submission
        explanation = soup.new_tag('div', attrs={'class': 'explanation', 'style': 'display: none;'})
        explanation.string = question.explanation
        container.append(explanation)

    return container


def generate_questions_html(questions: List[Question]) -> str:
    """
    Render questions as HTML, numbered from 1 in list order.

    Args:
        questions: Questions in display order

    Returns:
        HTML fragment, or a placeholder message when there are no questions
    """
    if not questions:
        return NO_QUESTIONS_HTML

    soup = BeautifulSoup('', 'html.parser')
    for number, question in enumerate(questions, start=1):
        soup.append(_question_div(soup, question, number))
    return str(soup)


def _text(value) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def build_placeholder_values(config: ExamConfig, questions_html: str) -> Dict[str, str]:
    """
    Map every recognised placeholder name to its replacement text.

    Values are inserted verbatim; only QUESTIONS_HTML is generated markup.
    """
    use_urls = config.use_custom_urls
    return {
        'EXAM_TITLE': _text(config.title),
        'SUBJECT': _text(config.subject),
        'DURATION': _text(config.duration),
        'INSTRUCTIONS': _text(config.instructions),
        'QUESTIONS_URL': _text(config.questions_url) if use_urls else '',
        'ANSWERS_URL': _text(config.answers_url) if use_urls else '',
        'QUESTIONS_HTML': questions_html,
        'QUESTIONS_COUNT': str(len(config.questions)),
        'SHOW_TIMER': _text(config.show_timer),
        'ALLOW_NAVIGATION': _text(config.allow_navigation),
        'RANDOMIZE_QUESTIONS': _text(config.randomize_questions),
        'THEME': _text(config.theme),
    }


def find_placeholders(template_html: str) -> List[str]:
    """Names of all {{NAME}} tokens in the template, in first-seen order."""
    seen = []
    for match in PLACEHOLDER_PATTERN.finditer(template_html):
        if match.group(1) not in seen:
            seen.append(match.group(1))
    return seen


def substitute_placeholders(template_html: str, values: Dict[str, str]) -> str:
    """
    Replace every occurrence of each known {{NAME}} token.

    Unknown tokens are left untouched. Replacement text is not scanned
    again, so a value containing "{{SUBJECT}}" stays literal.
    """
    def replace(match):
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, template_html)


def inject_theme_styles(html: str, theme: str) -> str:
    """
    Insert the theme's <style> block just before </head>.

    Raises:
        InvalidTemplateError: If the document has no </head>
    """
    match = HEAD_CLOSE_PATTERN.search(html)
    if not match:
        raise InvalidTemplateError('Template has no </head> to attach the theme stylesheet to')

    style = f"<style>{get_theme_styles(theme)}</style>"
    return html[:match.start()] + style + html[match.start():]


def check_required_fields(config: ExamConfig) -> None:
    """Raise MissingRequiredFieldError if title or subject is empty."""
    if not config.title or not config.title.strip():
        raise MissingRequiredFieldError('title')
    if not config.subject or not config.subject.strip():
        raise MissingRequiredFieldError('subject')


def assemble(config: ExamConfig, template_html: str) -> str:
    """
    Generate the complete exam document.

    Args:
        config: Exam configuration (read only)
        template_html: Raw template text

    Returns:
        Standalone HTML with placeholders resolved and theme applied

    Raises:
        MissingRequiredFieldError: If title or subject is empty
        InvalidTemplateError: If the template has no </head>
    """
    check_required_fields(config)

    questions_html = generate_questions_html(config.questions)
    values = build_placeholder_values(config, questions_html)

    html = substitute_placeholders(template_html, values)
    return inject_theme_styles(html, config.theme)
