"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Running the principle demonstrations
"""
import argparse
import sys
from typing import List, Optional

from ood_principles._package import DESCRIPTION, PACKAGE_NAME, __version__
from ood_principles.application import Principle, PrincipleDemonstrationService
from ood_principles.cli.formatters import format_output
from ood_principles.config import ConfigurationManager, LogLevel
from ood_principles.domain.base.exceptions import DomainException
from ood_principles.helpers.logger import get_logger, setup_logging

ALL_PRINCIPLES = "all"

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo                  # Run every demonstration
  %(prog)s demo ocp              # Run the open/closed demonstration
  %(prog)s --format table demo   # Display as table
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    demo_parser = subparsers.add_parser('demo', help='Run principle demonstrations')
    demo_parser.add_argument(
        'principle',
        nargs='?',
        default=ALL_PRINCIPLES,
        choices=[principle.value for principle in Principle] + [ALL_PRINCIPLES],
        help='Principle to demonstrate (default: all)',
    )

    return parser.parse_args(argv)


def run_demo(args: argparse.Namespace, service: PrincipleDemonstrationService) -> dict:
    """Execute the demo command and return serialisable output."""
    if args.principle == ALL_PRINCIPLES:
        results = service.demonstrate_all()
    else:
        results = [service.demonstrate(Principle(args.principle))]
    return {"demonstrations": [result.to_dict() for result in results]}


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        app_config = config_manager.app_config
        logging_config = app_config.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
        setup_logging(logging_config)

        service = PrincipleDemonstrationService(app_config.demo)
        output = run_demo(args, service)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(output, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
