# =============================================================================
# Mailsmith Command Line
# =============================================================================
# Renders a template file from the command line:
#
#   mailsmith newsletter.json                  # -> newsletter.html
#   mailsmith newsletter.json -o out.html --text
#   mailsmith newsletter.json --preview        # print a terminal preview
#   mailsmith newsletter.json --validate       # shape check only
#
# The CLI is a thin shell over RenderEngine: load config, load template,
# render, write files.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from mailsmith import __version__, __app_name__
from mailsmith.config import Config, ConfigError, print_paths
from mailsmith.core.document import Document, DocumentError
from mailsmith.rendering.engine import RenderEngine

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Mailsmith: render newsletter templates into email-safe HTML",
    )

    parser.add_argument(
        "template",
        nargs="?",
        type=Path,
        help="Path to a JSON template",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Where to write the HTML (default: template path with .html)",
    )

    parser.add_argument(
        "--text",
        action="store_true",
        help="Also write the plain-text alternative next to the HTML (.txt)",
    )

    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a terminal preview instead of writing files",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only check the template shape",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Mailsmith.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and the template
        4. Renders and writes (or previews) the result

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Handle --paths flag
    if args.paths:
        print_paths()
        return 0

    if args.template is None:
        print("No template given (see --help)", file=sys.stderr)
        return 2

    # Load configuration
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    # Load the template
    try:
        document = Document.load(args.template)
    except DocumentError as e:
        print(f"Template error: {e}", file=sys.stderr)
        return 1

    engine = RenderEngine(config.rendering, preview=config.preview)

    if args.validate:
        validation = engine.validate(document)
        if not validation.valid:
            print(f"Invalid template: {validation.error}", file=sys.stderr)
            return 1
        print(f"{args.template}: OK ({len(document.elements)} elements)")
        return 0

    result = engine.render(document)
    if not result.success:
        print(f"Rendering failed: {result.message}", file=sys.stderr)
        return 1

    if args.preview:
        print(engine.preview(result.html))
        return 0

    html_path = args.output or args.template.with_suffix(".html")
    html_path.write_text(result.html, encoding="utf-8")
    logger.info(f"Wrote {html_path}")
    print(f"HTML:  {html_path}")

    if args.text:
        text_path = html_path.with_suffix(".txt")
        text_path.write_text(result.text, encoding="utf-8")
        logger.info(f"Wrote {text_path}")
        print(f"Text:  {text_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
