#!/usr/bin/env python3
"""
CLI for exporting Org clock entries to CSV.

Provides the batch command: reads documents, writes header and rows, and
reports success through the exit status.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from core.exceptions import ClockflowError
from orgclock import org_clock_csv, org_clock_csv_to_file

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def export_cli(
    files: List[str],
    output_path: Optional[str] = None,
    no_check: bool = False,
    separator: Optional[str] = None,
    header: Optional[str] = None
) -> int:
    """Export clock entries of files to output_path, or stdout when omitted."""
    if output_path:
        count = org_clock_csv_to_file(
            output_path,
            files,
            no_check=no_check,
            header=header,
            separator=separator
        )
        print(f"✓ {count} clock entries exported to: {output_path}", file=sys.stderr)
        print(f"  Files: {len(files)}", file=sys.stderr)
        return count

    output = org_clock_csv(files, no_check=no_check, header=header, separator=separator)
    sys.stdout.write(output)
    return output.count('\n') - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Export Org clock entries to CSV'
    )
    parser.add_argument('files', nargs='*', type=str, help='Org files (default: CLOCKFLOW_AGENDA_FILES)')
    parser.add_argument('-o', '--output', type=str, help='Output file path (default: stdout)')
    parser.add_argument('--no-check', action='store_true', help='Skip the file existence check')
    parser.add_argument('--separator', type=str, default=None, help='Separator for the parents column')
    parser.add_argument('--header', type=str, default=None, help='Header line text')
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='Logging level'
    )
    return parser


def batch_and_exit(argv: Optional[List[str]] = None) -> int:
    """
    Run the batch export.

    Returns:
        0 on success, 1 on failure
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = args.log_level or settings.log_level.upper()
    if log_level not in LOG_LEVELS:
        parser.error(f'invalid CLOCKFLOW_LOG_LEVEL: {settings.log_level}')

    logging.basicConfig(
        level=log_level,
        format='%(levelname)s %(name)s: %(message)s'
    )

    files = args.files or settings.get_agenda_files()
    if not files:
        parser.error('no input files given and CLOCKFLOW_AGENDA_FILES is empty')

    try:
        export_cli(
            files=files,
            output_path=args.output,
            no_check=args.no_check,
            separator=args.separator,
            header=args.header
        )
    except ClockflowError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


def main():
    sys.exit(batch_and_exit())


if __name__ == '__main__':
    main()
