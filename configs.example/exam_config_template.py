"""
Template for exam configuration - copy to configs/<name>_config.py and customize.

Run with: python run_exam.py --exam <name> --questions <file>.txt
"""

EXAM_CONFIG = {
    'title': 'Algebra Midterm',  # Required
    'subject': 'Mathematics',  # Required
    'duration': '60 minutes',
    'instructions': 'Answer all questions. Each question carries equal marks.',

    # External question/answer papers, only used when use_custom_urls is True
    'use_custom_urls': False,
    'questions_url': '',
    'answers_url': '',

    'template': 'demo',  # demo | minor-test | english-test
    'theme': 'light',  # light | dark | blue | green

    # Passed to the template as "true"/"false"
    'show_timer': True,
    'allow_navigation': True,
    'randomize_questions': False,

    # Optional: questions written directly in the config
    # (bulk files and CSV banks are appended after these)
    'questions': [
        {
            'text': 'What is 2 + 2?',
            'options': ['3', '4', '5', '6'],
            'correct_answer': 1,  # zero-based: 1 means B
            'explanation': '2 + 2 equals 4',
        },
    ],
}
