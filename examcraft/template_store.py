"""
Template Store: Locate and read the static exam templates.

Templates are plain HTML files containing {{NAME}} placeholders. They can
be read from a local folder (TemplateStore) or fetched over HTTP from
wherever the files are hosted (RemoteTemplateStore).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List
from urllib.parse import quote

import httpx

from .errors import TemplateFetchError

DEFAULT_TEMPLATE = 'demo'


@dataclass(frozen=True)
class TemplateInfo:
    id: str
    name: str
    description: str
    filename: str
    features: List[str] = field(default_factory=list)


TEMPLATES: List[TemplateInfo] = [
    TemplateInfo(
        id='demo',
        name='Demo Template',
        description='Clean and modern design with sidebar navigation',
        filename='Demo (1).html',
        features=['Sidebar Navigation', 'Progress Tracking', 'Clean Design'],
    ),
    TemplateInfo(
        id='minor-test',
        name='Minor Test Template',
        description='Compact layout perfect for quick assessments',
        filename='Minor_Test_@_12.html',
        features=['Compact Layout', 'Quick Navigation', 'Mobile Friendly'],
    ),
    TemplateInfo(
        id='english-test',
        name='English Test Template',
        description='Specialized for language and text-heavy exams',
        filename='Test_15_(English).html',
        features=['Text Focused', 'Reading Friendly', 'Language Support'],
    ),
]

TEMPLATE_FILENAMES: Dict[str, str] = {t.id: t.filename for t in TEMPLATES}


def is_known_template(template_id: str) -> bool:
    return template_id in TEMPLATE_FILENAMES


def get_template_filename(template_id: str) -> str:
    """Map a template id to its file name; unknown ids use the demo template."""
    return TEMPLATE_FILENAMES.get(template_id, TEMPLATE_FILENAMES[DEFAULT_TEMPLATE])


def load_template(template_path: str) -> str:
    """Load HTML template from file."""
    with open(template_path, 'r', encoding='utf-8') as f:
        return f.read()


class TemplateStore:
    """Templates kept in a local directory."""

    def __init__(self, templates_dir: str = 'templates'):
        self.templates_dir = Path(templates_dir)

    def path_for(self, template_id: str) -> Path:
        return self.templates_dir / get_template_filename(template_id)

    def fetch(self, template_id: str) -> str:
        """
        Read the raw text of a template.

        Raises:
            TemplateFetchError: If the file is missing or unreadable
        """
        path = self.path_for(template_id)
        try:
            return load_template(str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateFetchError(f"Could not read template {path}: {e}") from e


class RemoteTemplateStore:
    """
    Templates served over HTTP, e.g. from the site hosting the exams.

    Args:
        base_url: URL of the folder containing the template files
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)
    """

    def __init__(self, base_url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    def url_for(self, template_id: str) -> str:
        return f"{self.base_url}/{quote(get_template_filename(template_id))}"

    async def fetch(self, template_id: str) -> str:
        """
        Download the raw text of a template.

        Raises:
            TemplateFetchError: On network failure or a non-2xx response
        """
        url = self.url_for(template_id)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPError as e:
            raise TemplateFetchError(f"Could not fetch template {url}: {e}") from e
