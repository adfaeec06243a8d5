"""Command-line interface for pagepull."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from . import __version__
from .browser import BrowserSession, connect_to_existing, launch_browser, navigate_to
from .console import error, info, success
from .extraction import extract_from_html, extract_from_page
from .logging_config import level_for_verbosity, setup_logging
from .models import (
    Cardinality,
    ConnectConfig,
    ExtractionMode,
    ExtractionOptions,
    ExtractionResult,
    FormatOptions,
    LaunchConfig,
    OutputFormat,
    SelectorKind,
    Viewport,
)
from .output import format_output

OUTPUT_CHOICES = [fmt.value for fmt in OutputFormat]


def _add_extraction_arguments(parser: argparse.ArgumentParser, live: bool) -> None:
    group = parser.add_argument_group("extraction")
    group.add_argument(
        "--selector",
        "-s",
        required=not live,
        help="CSS selector to extract" if not live else "CSS or XPath selector to extract",
    )
    if live:
        group.add_argument(
            "--xpath",
            action="store_true",
            help="Treat selector as XPath instead of CSS",
        )
    group.add_argument(
        "--attribute",
        "-a",
        metavar="NAME",
        help="Extract attribute value instead of text",
    )
    group.add_argument(
        "--html",
        action="store_true",
        help="Extract HTML content instead of text",
    )
    group.add_argument(
        "--markdown",
        action="store_true",
        help="Convert extracted HTML to Markdown",
    )
    group.add_argument(
        "--multiple",
        "-m",
        action="store_true",
        help="Extract all matching elements",
    )
    group.add_argument(
        "--output",
        "-o",
        choices=OUTPUT_CHOICES,
        default=OutputFormat.TEXT.value,
        help="Output format (default: text)",
    )
    if live:
        group.add_argument(
            "--no-wait",
            action="store_false",
            dest="wait",
            help="Do not wait for the selector to appear",
        )
        group.add_argument(
            "--timeout",
            type=int,
            default=10000,
            metavar="MS",
            help="Timeout for waiting in milliseconds (default: 10000)",
        )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="pagepull",
        description="Extract content from web pages with CSS or XPath selectors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract the first heading from a saved page
  pagepull extract page.html -s h1

  # All list items as JSON
  pagepull extract page.html -s "ul > li" -m -o json

  # Render a page in a new browser and convert the article to Markdown
  pagepull launch https://example.com -s article --markdown

  # Use a running Chrome started with --remote-debugging-port=9222
  pagepull connect https://example.com --debug-url http://localhost:9222 -s "//h1" --xpath
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress status messages",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    extract_parser = subparsers.add_parser("extract", help="Extract content from a saved HTML file")
    extract_parser.add_argument("file", type=Path, help="Path to HTML file")
    _add_extraction_arguments(extract_parser, live=False)

    launch_parser = subparsers.add_parser("launch", help="Launch a new browser and extract from a URL")
    launch_parser.add_argument("url", help="URL to navigate to")
    browser_group = launch_parser.add_argument_group("browser")
    browser_group.add_argument(
        "--no-headless",
        action="store_false",
        dest="headless",
        help="Run browser with a visible window",
    )
    browser_group.add_argument(
        "--viewport",
        metavar="WxH",
        help="Viewport size (e.g., 1920x1080)",
    )
    browser_group.add_argument(
        "--user-agent",
        help="Custom User-Agent string",
    )
    _add_extraction_arguments(launch_parser, live=True)

    connect_parser = subparsers.add_parser(
        "connect",
        help="Connect to a running browser over the DevTools protocol and extract from a URL",
    )
    connect_parser.add_argument("url", help="URL to navigate to")
    connect_parser.add_argument(
        "--debug-url",
        required=True,
        metavar="ENDPOINT",
        help="Chrome DevTools Protocol endpoint (e.g., http://localhost:9222)",
    )
    _add_extraction_arguments(connect_parser, live=True)

    return parser


def build_extraction_options(args: argparse.Namespace) -> tuple[ExtractionOptions, FormatOptions]:
    """
    Translate parsed arguments into extraction and format options.

    Markdown output always extracts HTML; otherwise ``--html`` beats
    ``--attribute``, and text is the default.

    Raises:
        ValueError: If the options fail validation
    """
    use_markdown = args.markdown or args.output == OutputFormat.MARKDOWN.value

    if use_markdown or args.html:
        mode = ExtractionMode.HTML
    elif args.attribute:
        mode = ExtractionMode.ATTRIBUTE
    else:
        mode = ExtractionMode.TEXT

    option_kwargs: dict = {
        "selector": args.selector,
        "selector_kind": SelectorKind.XPATH if getattr(args, "xpath", False) else SelectorKind.CSS,
        "mode": mode,
        "attribute_name": args.attribute,
        "cardinality": Cardinality.MULTIPLE if args.multiple else Cardinality.SINGLE,
    }
    if hasattr(args, "wait"):
        option_kwargs["wait"] = args.wait
        option_kwargs["timeout_ms"] = args.timeout

    options = ExtractionOptions(**option_kwargs)
    format_options = FormatOptions(format=OutputFormat.MARKDOWN if use_markdown else OutputFormat(args.output))
    return options, format_options


def print_result(
    result: ExtractionResult,
    format_options: FormatOptions,
    console: Console,
    quiet: bool = False,
) -> None:
    """Print a formatted result, followed by an item count on success."""
    output = format_output(result, format_options)

    if not result.success:
        console.print(f"[red]{escape(output)}[/red]")
        return
    if result.data is None:
        console.print(f"[yellow]{escape(output)}[/yellow]")
    else:
        console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)

    if not quiet:
        info(f"Extracted {result.count} item(s)", console)


def run_extract(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    """Run the static extraction command."""
    try:
        options, format_options = build_extraction_options(args)
    except ValueError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    try:
        html = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        error(f"Could not read {args.file}: {e}", err_console)
        return 1

    result = extract_from_html(html, options)
    print_result(result, format_options, console, quiet=args.quiet)
    return 0


async def _open_session(config: Union[LaunchConfig, ConnectConfig]) -> BrowserSession:
    if isinstance(config, ConnectConfig):
        return await connect_to_existing(config)
    return await launch_browser(config)


async def run_live(args: argparse.Namespace, console: Console, err_console: Console) -> int:
    """Run the launch or connect command."""
    try:
        extraction = build_extraction_options(args) if args.selector else None
        config: Union[LaunchConfig, ConnectConfig]
        if args.command == "connect":
            config = ConnectConfig(debug_url=args.debug_url)
        else:
            config = LaunchConfig(
                headless=args.headless,
                viewport=Viewport.parse(args.viewport) if args.viewport else None,
                user_agent=args.user_agent,
            )
    except ValueError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    session: Optional[BrowserSession] = None
    result: Optional[ExtractionResult] = None
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
            disable=args.quiet,
        ) as progress:
            starting = "Connecting to browser..." if args.command == "connect" else "Launching browser..."
            task = progress.add_task(f"[cyan]{starting}", total=None)
            session = await _open_session(config)

            progress.update(task, description=f"[cyan]Navigating to {escape(args.url)}...")
            await navigate_to(session.page, args.url, config.wait_until)

            if extraction is not None:
                progress.update(task, description="[cyan]Extracting content...")
                result = await extract_from_page(session.page, extraction[0])

        if extraction is None or result is None:
            if not args.quiet:
                success("Page loaded. Use --selector to extract content.", console)
            return 0

        format_options = extraction[1].model_copy(update={"base_url": session.page.url})
        print_result(result, format_options, console, quiet=args.quiet)
        return 0

    except Exception as e:
        error(str(e) or "Unknown error", err_console)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    finally:
        if session is not None:
            await session.close()


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(level_for_verbosity(args.verbose, args.quiet), force=True)

    console = Console()
    err_console = Console(stderr=True)

    if args.command == "extract":
        return run_extract(args, console, err_console)
    return asyncio.run(run_live(args, console, err_console))


if __name__ == "__main__":
    sys.exit(main())
