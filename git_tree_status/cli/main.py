"""Entry point for git-tree-status"""

import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_tree_status.cli.args import parse_args
from git_tree_status.config import Config
from git_tree_status.core.tree_walker import TreeWalker
from git_tree_status.logging_config import get_logger, setup_logging

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


def build_console(config: Config) -> Console:
    """Create the output console, honouring the color setting."""
    if config.color:
        return console
    return Console(highlight=False, no_color=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    debug = False
    try:
        parsed_args = parse_args(argv)
        debug = parsed_args.debug

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        options = vars(parsed_args).copy()
        options["root_path"] = options.pop("path") or os.getcwd()
        options["color"] = not options.pop("no_color")
        config = Config.from_dict(options)

        if config.debug:
            error_console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                error_console.print(f"  {key}: {value}", markup=False)

        walker = TreeWalker(branches_as_tree=config.branches_as_tree)
        printed = walker.report(
            config.root_path, config.depth, build_console(config), flat=config.flat
        )
        logger.info(f"Printed {printed} lines")

        return 0
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        logger.debug("Unhandled error", exc_info=True)
        if debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
