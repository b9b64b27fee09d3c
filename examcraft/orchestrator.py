"""
Orchestrator: Main workflow that ties all modules together.

Coordinates:
1. Question loading (bulk text file and/or CSV question bank)
2. Template fetch and HTML generation
3. Saving the exam file
4. Optional preview rendering
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from .csv_import import CSVQuestionImporter
from .html_generator import PLACEHOLDERS, find_placeholders
from .models import ExamConfig
from .preview import render_preview
from .session import ExamSession
from .template_store import RemoteTemplateStore, TemplateStore, get_template_filename

console = Console()


def make_store(templates_dir: str = 'templates', templates_url: Optional[str] = None):
    """Remote store when a URL is given, local folder otherwise."""
    if templates_url:
        return RemoteTemplateStore(templates_url)
    return TemplateStore(templates_dir)


def load_questions(
    session: ExamSession,
    bulk_file: Optional[str] = None,
    csv_file: Optional[str] = None
) -> int:
    """
    Append questions from the given files to the session.

    Both sources are read before anything is appended, so a failing file
    leaves the configuration unchanged.

    Returns:
        Number of questions added
    """
    csv_questions = []
    if csv_file:
        console.print(f"\n[cyan]📊 Reading question bank {Path(csv_file).name}...[/cyan]")
        csv_questions = CSVQuestionImporter(csv_file).get_questions()
        console.print(f"   [green]✓[/green] {len(csv_questions)} questions found")

    bulk_questions = []
    if bulk_file:
        console.print(f"\n[cyan]📝 Importing questions from {Path(bulk_file).name}...[/cyan]")
        session.load_bulk_file(bulk_file)
        bulk_questions = session.import_bulk()
        console.print(f"   [green]✓[/green] {len(bulk_questions)} questions imported")

        parser = session.last_import
        if parser.extra_options:
            console.print(f"   [yellow]⚠ Ignored {parser.extra_options} option lines beyond D)[/yellow]")
        if parser.skipped_lines:
            console.print(f"   [dim]Skipped {len(parser.skipped_lines)} unrecognised lines[/dim]")

    # Bulk questions first, then the question bank
    session.config.questions.extend(csv_questions)
    return len(bulk_questions) + len(csv_questions)


async def build_exam(
    config: ExamConfig,
    output_dir: str = 'output',
    templates_dir: str = 'templates',
    templates_url: Optional[str] = None,
    bulk_file: Optional[str] = None,
    csv_file: Optional[str] = None,
    preview: bool = False
) -> Path:
    """
    Main workflow: questions → HTML → exam file (→ preview)

    Args:
        config: Exam configuration
        output_dir: Folder for the exported exam
        templates_dir: Local template folder
        templates_url: Base URL to fetch templates from instead
        bulk_file: Optional bulk question text file
        csv_file: Optional CSV question bank
        preview: Also render a PNG preview next to the exam

    Returns:
        Path of the saved HTML file
    """
    header_text = f"[bold cyan]Exam HTML Builder[/bold cyan]\n[yellow]{config.title or '(untitled)'}: {config.subject or '(no subject)'}[/yellow]"
    console.print(Panel(header_text, border_style="cyan", padding=(1, 2)))

    session = ExamSession(config, store=make_store(templates_dir, templates_url))

    # Step 1: Questions
    load_questions(session, bulk_file=bulk_file, csv_file=csv_file)

    # Step 2: Generate
    console.print(f"\n[cyan]🧩 Generating HTML from {get_template_filename(config.template)}...[/cyan]")
    html = await session.generate()
    console.print(f"   [green]✓[/green] Theme: {config.theme}, questions: {len(config.questions)}")

    unknown = [name for name in find_placeholders(html) if name not in PLACEHOLDERS]
    if unknown:
        console.print(f"   [yellow]⚠ Template tokens left as-is: {', '.join(unknown)}[/yellow]")

    # Step 3: Save
    html_path = session.download(output_dir)
    console.print(f"   [green]✓[/green] Saved {html_path}")

    # Step 4: Preview
    preview_path = None
    if preview:
        preview_path = html_path.with_suffix('.png')
        console.print(f"\n[cyan]🖼  Rendering preview...[/cyan]")
        if await render_preview(html, str(preview_path)):
            console.print(f"   [green]✓[/green] Saved {preview_path}")
        else:
            preview_path = None

    summary_text = f"""[bold cyan]Summary:[/bold cyan]
  Questions: [green]{len(config.questions)}[/green]
  Template: [yellow]{config.template}[/yellow]  Theme: [yellow]{config.theme}[/yellow]
  Exam file: [yellow]{html_path}[/yellow]"""
    if preview_path:
        summary_text += f"\n  Preview: [yellow]{preview_path}[/yellow]"

    console.print(Panel(summary_text, border_style="green", padding=(1, 2)))
    return html_path
