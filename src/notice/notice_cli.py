"""
Command-line interface for the NOTICE checker.
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from typing import List

from diff import DiffRenderer
from notice.notice_checker import NoticeChecker
from notice.notice_comparator import NoticeComparator
from notice.notice_config import NoticeCheckConfig
from notice.notice_exceptions import ContentMismatchError, NoticeError


DEFAULT_CONFIG = 'notice-check.yaml'


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure logging to stderr and, optionally, a rotating log file."""
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # Keep up to 5 log files, max 1MB each
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=1024*1024,  # 1MB
            backupCount=4,
            encoding='utf-8'
        ))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def main(argv: List[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='notice-check',
        description="Check that a NOTICE file matches its generated contents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s check --generated build/NOTICE.generated   # Check NOTICE against generated text
  generate-notice | %(prog)s check --generated -      # Read generated text from stdin
  %(prog)s diff NOTICE.expected NOTICE                # Show differences between two files
  %(prog)s init                                       # Create default config
  %(prog)s validate-config                            # Validate configuration
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Check command
    check_parser = subparsers.add_parser('check', help='Check the NOTICE file')
    check_parser.add_argument('--generated', '-g', required=True,
                              help="Path to the generated NOTICE contents ('-' for stdin)")
    check_parser.add_argument('--config', '-c',
                              help=f'Configuration file path (default: {DEFAULT_CONFIG} if present)')
    check_parser.add_argument('--notice-file', help='Checked-in NOTICE file path')
    check_parser.add_argument('--build-dir', help='Directory the expected NOTICE file is written to')
    check_parser.add_argument('--encoding', '-e', help='Character encoding of the NOTICE files')
    check_parser.add_argument('--verbose', '-v', action='store_true',
                              help='Verbose output')
    check_parser.add_argument('--log-file', help='Also write log output to this file')

    # Diff command
    diff_parser = subparsers.add_parser('diff', help='Show differences between two files')
    diff_parser.add_argument('expected', help='Path to the expected file')
    diff_parser.add_argument('existing', help='Path to the existing file')
    diff_parser.add_argument('--encoding', '-e', default='UTF-8',
                             help='Character encoding of both files')

    # Init command
    init_parser = subparsers.add_parser('init', help='Create default configuration')
    init_parser.add_argument('--config', '-c', default=DEFAULT_CONFIG,
                             help='Configuration file path')
    init_parser.add_argument('--force', action='store_true',
                             help='Overwrite existing configuration')

    # Validate config command
    validate_parser = subparsers.add_parser('validate-config', help='Validate configuration')
    validate_parser.add_argument('--config', '-c', default=DEFAULT_CONFIG,
                                 help='Configuration file path')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'check':
        return handle_check(args)

    if args.command == 'diff':
        return handle_diff(args)

    if args.command == 'init':
        return handle_init(args)

    if args.command == 'validate-config':
        return handle_validate_config(args)

    print(f"Unknown command: {args.command}")
    return 1


def load_check_config(args: argparse.Namespace) -> NoticeCheckConfig:
    """Build the check configuration from the config file and command-line overrides."""
    if args.config:
        config = NoticeCheckConfig.load_from_file(args.config)

    elif os.path.exists(DEFAULT_CONFIG):
        config = NoticeCheckConfig.load_from_file(DEFAULT_CONFIG)

    else:
        config = NoticeCheckConfig.create_default()

    if args.notice_file:
        config.notice_file = args.notice_file

    if args.build_dir:
        config.build_dir = args.build_dir

    if args.encoding:
        config.encoding = args.encoding

    return config


def read_text(path: str, encoding: str) -> str:
    """Read a whole file, or stdin for '-', without translating line endings."""
    if path == '-':
        return sys.stdin.buffer.read().decode(encoding)

    with open(path, 'r', encoding=encoding, newline='') as f:
        return f.read()


def handle_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    setup_logging(args.verbose, args.log_file)

    try:
        config = load_check_config(args)

    except (OSError, NoticeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    config_errors = config.validate()
    if config_errors:
        print("Configuration errors found:", file=sys.stderr)
        for error in config_errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    try:
        expected = read_text(args.generated, config.encoding)

    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read generated NOTICE contents from {args.generated}: {e}", file=sys.stderr)
        return 1

    try:
        result = NoticeChecker(config).check(expected)

    except ContentMismatchError as e:
        print(f"NOTICE check failed: {e}", file=sys.stderr)
        return 1

    except NoticeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.message)
    return 0


def handle_diff(args: argparse.Namespace) -> int:
    """Handle the diff command."""
    try:
        comparator = NoticeComparator(args.encoding)
        expected = read_text(args.expected, args.encoding)
        result = comparator.compare(expected, args.existing)

    except (OSError, UnicodeDecodeError, NoticeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if result.is_identical:
        return 0

    sys.stdout.write(DiffRenderer().render(expected, result.existing_contents or ""))
    return 1


def handle_init(args: argparse.Namespace) -> int:
    """Handle the init command."""
    if os.path.exists(args.config) and not args.force:
        print(f"Configuration file already exists: {args.config}")
        print("Use --force to overwrite.")
        return 1

    config = NoticeCheckConfig.create_default()
    try:
        config.save_to_file(args.config)

    except OSError as e:
        print(f"Failed to write configuration file {args.config}: {e}")
        return 1

    print(f"Created configuration file: {args.config}")
    print(f"  NOTICE file: {config.notice_file}")
    print(f"  Expected file on mismatch: {config.expected_path}")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Handle the validate-config command."""
    if not os.path.exists(args.config):
        print(f"Configuration file not found: {args.config}")
        return 1

    try:
        config = NoticeCheckConfig.load_from_file(args.config)

    except NoticeError as e:
        print(f"Error loading configuration: {e}")
        return 1

    errors = config.validate()
    if errors:
        print("Configuration validation failed:")
        for error in errors:
            print(f"  ✗ {error}")
        return 1

    print("✓ Configuration is valid")
    print(f"  NOTICE file: {config.notice_file}")
    print(f"  Encoding: {config.encoding}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
