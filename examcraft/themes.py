"""
Themes: Static stylesheet blocks injected into the generated exam.

Each theme sets the colour variables and styles the markup produced by
html_generator.generate_questions_html.
"""

from typing import Dict, List

DEFAULT_THEME = 'light'

THEMES: List[Dict[str, str]] = [
    {'id': 'light', 'name': 'Light', 'description': 'Clean white background'},
    {'id': 'dark', 'name': 'Dark', 'description': 'Dark mode for reduced eye strain'},
    {'id': 'blue', 'name': 'Professional Blue', 'description': 'Corporate blue theme'},
    {'id': 'green', 'name': 'Nature Green', 'description': 'Calming green theme'},
]

THEME_STYLES: Dict[str, str] = {
    'light': """
        :root {
          --primary-color: #3b82f6;
          --background-color: #ffffff;
          --text-color: #1f2937;
          --border-color: #e5e7eb;
        }
        .question-container {
          background: white;
          border: 1px solid var(--border-color);
          border-radius: 8px;
          padding: 20px;
          margin: 20px 0;
        }
        .question-title {
          color: var(--primary-color);
          font-size: 1.2em;
          font-weight: bold;
          margin-bottom: 10px;
        }
        .question-text {
          font-size: 1.1em;
          margin-bottom: 15px;
          line-height: 1.5;
        }
        .option-label {
          display: block;
          padding: 10px;
          margin: 5px 0;
          border: 1px solid #ddd;
          border-radius: 5px;
          cursor: pointer;
          transition: background-color 0.2s;
        }
        .option-label:hover {
          background-color: #f0f9ff;
        }
        .option-text {
          margin-left: 10px;
        }
    """,
    'dark': """
        :root {
          --primary-color: #60a5fa;
          --background-color: #1f2937;
          --text-color: #f9fafb;
          --border-color: #374151;
        }
        body { background-color: var(--background-color); color: var(--text-color); }
        .question-container {
          background: #374151;
          border: 1px solid var(--border-color);
          border-radius: 8px;
          padding: 20px;
          margin: 20px 0;
        }
        .question-title {
          color: var(--primary-color);
          font-size: 1.2em;
          font-weight: bold;
          margin-bottom: 10px;
        }
        .question-text {
          font-size: 1.1em;
          margin-bottom: 15px;
          line-height: 1.5;
          color: var(--text-color);
        }
        .option-label {
          display: block;
          padding: 10px;
          margin: 5px 0;
          border: 1px solid #4b5563;
          border-radius: 5px;
          cursor: pointer;
          transition: background-color 0.2s;
          color: var(--text-color);
        }
        .option-label:hover {
          background-color: #4b5563;
        }
        .option-text {
          margin-left: 10px;
        }
    """,
    'blue': """
        :root {
          --primary-color: #1e40af;
          --background-color: #eff6ff;
          --text-color: #1e3a8a;
          --border-color: #bfdbfe;
        }
        .question-container {
          background: white;
          border: 1px solid var(--border-color);
          border-radius: 8px;
          padding: 20px;
          margin: 20px 0;
        }
        .question-title {
          color: var(--primary-color);
          font-size: 1.2em;
          font-weight: bold;
          margin-bottom: 10px;
        }
        .question-text {
          font-size: 1.1em;
          margin-bottom: 15px;
          line-height: 1.5;
        }
        .option-label {
          display: block;
          padding: 10px;
          margin: 5px 0;
          border: 1px solid var(--border-color);
          border-radius: 5px;
          cursor: pointer;
          transition: background-color 0.2s;
        }
        .option-label:hover {
          background-color: #dbeafe;
        }
        .option-text {
          margin-left: 10px;
        }
    """,
    'green': """
        :root {
          --primary-color: #059669;
          --background-color: #ecfdf5;
          --text-color: #064e3b;
          --border-color: #a7f3d0;
        }
        .question-container {
          background: white;
          border: 1px solid var(--border-color);
          border-radius: 8px;
          padding: 20px;
          margin: 20px 0;
        }
        .question-title {
          color: var(--primary-color);
          font-size: 1.2em;
          font-weight: bold;
          margin-bottom: 10px;
        }
        .question-text {
          font-size: 1.1em;
          margin-bottom: 15px;
          line-height: 1.5;
        }
        .option-label {
          display: block;
          padding: 10px;
          margin: 5px 0;
          border: 1px solid var(--border-color);
          border-radius: 5px;
          cursor: pointer;
          transition: background-color 0.2s;
        }
        .option-label:hover {
          background-color: #d1fae5;
        }
        .option-text {
          margin-left: 10px;
        }
    """,
}


def is_known_theme(theme_id: str) -> bool:
    return theme_id in THEME_STYLES


def get_theme_styles(theme_id: str) -> str:
    """Return the CSS block for a theme, falling back to the light theme."""
    return THEME_STYLES.get(theme_id, THEME_STYLES[DEFAULT_THEME])
