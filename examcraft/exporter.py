"""
Exporter: Save a generated exam as a standalone HTML file.
"""

import re
from pathlib import Path

from .errors import ConfigError


def sanitize_filename(title: str) -> str:
    """
    Convert an exam title to a safe file name stem.

    Whitespace runs become underscores; path separators and leading dots
    are removed so the name cannot leave the output folder.

    Examples:
        "Algebra Midterm" → "Algebra_Midterm"
        "../../escaped" → "escaped"
        "Maths/Physics" → "MathsPhysics"
    """
    name = re.sub(r'[/\\\x00]', '', title.strip())
    name = re.sub(r'\s+', '_', name)
    name = name.lstrip('.')
    if not name:
        raise ConfigError(f"Title {title!r} does not give a usable file name")
    return name


def export_filename(title: str) -> str:
    """
    File name for an exported exam.

    Examples:
        "Algebra Midterm" → "Algebra_Midterm_exam.html"
        "Unit  3\tQuiz" → "Unit_3_Quiz_exam.html"
    """
    name = sanitize_filename(title)
    return f"{name}_exam.html"


def save_html(html: str, output_dir: str, title: str) -> Path:
    """
    Write the exam HTML into output_dir.

    Returns:
        Path of the written file
    """
    output_path = Path(output_dir) / export_filename(title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(html)
    return output_path
