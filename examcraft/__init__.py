"""Build standalone HTML exams from a configuration and a question bank."""
