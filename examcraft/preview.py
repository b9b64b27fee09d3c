"""
Preview: Render a generated exam in headless Chromium.

Produces a PNG screenshot, or a PDF when the output path ends in .pdf,
so the exam can be checked without opening a browser.
"""

from pathlib import Path

from playwright.async_api import async_playwright
from rich.console import Console

console = Console()


async def render_preview(html_content: str, output_path: str, full_page: bool = True) -> bool:
    """
    Render exam HTML to an image or PDF.

    Args:
        html_content: Complete HTML document
        output_path: Where to save the preview (.png or .pdf)
        full_page: Capture the whole scrollable page for screenshots

    Returns:
        True if successful, False otherwise
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch()
            page = await browser.new_page()

            await page.set_content(html_content)
            await page.wait_for_load_state('networkidle')

            if output.suffix.lower() == '.pdf':
                await page.pdf(
                    path=str(output),
                    format='Letter',
                    margin={
                        'top': '0.75in',
                        'right': '0.75in',
                        'bottom': '0.75in',
                        'left': '0.75in'
                    },
                    print_background=True
                )
            else:
                await page.screenshot(path=str(output), full_page=full_page)

            await browser.close()
            return True

    except Exception as e:
        console.print(f"      [red]✗[/red] Preview rendering failed: {e}")
        return False
