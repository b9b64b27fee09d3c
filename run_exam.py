#!/usr/bin/env python3
"""
Exam HTML Builder - Main CLI

Usage:
    python run_exam.py --exam algebra --questions questions.txt

Generates one standalone HTML exam from a config module and a question file.
"""

import asyncio
import argparse
import importlib.util
import sys
from importlib import import_module
from pathlib import Path

from rich.console import Console

from examcraft.errors import ExamCraftError
from examcraft.models import ExamConfig
from examcraft.orchestrator import build_exam
from examcraft.template_store import TEMPLATES
from examcraft.themes import THEMES, THEME_STYLES

console = Console()


def load_config_dict(exam: str = None, config_path: str = None) -> dict:
    """
    Load EXAM_CONFIG from configs/<exam>_config.py or from a file path.

    Raises:
        ImportError: If the module cannot be found
        AttributeError: If it has no EXAM_CONFIG
    """
    if config_path:
        spec = importlib.util.spec_from_file_location('exam_config', config_path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load {config_path}")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    else:
        module = import_module(f'configs.{exam}_config')
    return module.EXAM_CONFIG


def print_templates() -> None:
    for template in TEMPLATES:
        console.print(f"[bold]{template.id}[/bold]  {template.name}  [dim]{template.filename}[/dim]")
        console.print(f"   {template.description}  [dim]({', '.join(template.features)})[/dim]")


def print_themes() -> None:
    for theme in THEMES:
        console.print(f"[bold]{theme['id']}[/bold]  {theme['name']}  [dim]{theme['description']}[/dim]")


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Generate a standalone HTML exam',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Config module configs/algebra_config.py plus a bulk question file
  python run_exam.py --exam algebra --questions algebra.txt

  # Config file anywhere on disk, dark theme, with a preview screenshot
  python run_exam.py --config my_exam.py --theme dark --preview

  # Questions from a spreadsheet, templates served over HTTP
  python run_exam.py --exam algebra --csv bank.csv --templates-url https://example.org/templates
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--exam', type=str, help='Config name (loads configs/<name>_config.py)')
    source.add_argument('--config', type=str, help='Path to a config file defining EXAM_CONFIG')

    parser.add_argument('--questions', type=str, help='Bulk question text file (Q:/A)/Answer: format)')
    parser.add_argument('--csv', type=str, help='CSV question bank (question, a-d, answer, explanation)')
    parser.add_argument('--title', type=str, help='Override the exam title')
    parser.add_argument('--subject', type=str, help='Override the subject')
    parser.add_argument('--template', type=str, choices=[t.id for t in TEMPLATES], help='Template to use')
    parser.add_argument('--theme', type=str, choices=list(THEME_STYLES), help='Colour theme')
    parser.add_argument('--output', type=str, default='output', help='Output directory (default: output/)')
    parser.add_argument('--templates-dir', type=str, default='templates', help='Local template folder')
    parser.add_argument('--templates-url', type=str, help='Fetch templates from this base URL instead')
    parser.add_argument('--preview', action='store_true', help='Also render a PNG preview (needs Playwright browsers)')
    parser.add_argument('--list-templates', action='store_true', help='List available templates and exit')
    parser.add_argument('--list-themes', action='store_true', help='List available themes and exit')

    args = parser.parse_args()

    if args.list_templates:
        print_templates()
        return
    if args.list_themes:
        print_themes()
        return

    for path in (args.questions, args.csv, args.config):
        if path and not Path(path).exists():
            console.print(f"[red]✗[/red] Error: file not found: {path}")
            sys.exit(1)

    # Load exam config
    config_data = {}
    if args.exam or args.config:
        try:
            config_data = load_config_dict(args.exam, args.config)
        except ImportError as e:
            console.print(f"[red]✗[/red] Error: config for '{args.exam or args.config}' not found")
            console.print(f"   [dim]Create it by copying configs.example/exam_config_template.py[/dim]")
            console.print(f"   [dim]Error details: {e}[/dim]")
            sys.exit(1)
        except AttributeError:
            console.print(f"[red]✗[/red] Error: config is missing the EXAM_CONFIG variable")
            sys.exit(1)

    try:
        config = ExamConfig.from_dict(config_data)
        for name in ('title', 'subject', 'template', 'theme'):
            value = getattr(args, name)
            if value is not None:
                setattr(config, name, value)

        asyncio.run(build_exam(
            config,
            output_dir=args.output,
            templates_dir=args.templates_dir,
            templates_url=args.templates_url,
            bulk_file=args.questions,
            csv_file=args.csv,
            preview=args.preview
        ))
    except ExamCraftError as e:
        console.print(f"\n[red]✗[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n\n[yellow]⚠ Interrupted by user[/yellow]")
        sys.exit(1)


if __name__ == '__main__':
    main()
