"""
Command-line entry point for inserting docstring templates into one file.

Usage:
    auto-doc path/to/module.py
    auto-doc path/to/app.ts --dry-run
    auto-doc path/to/script --language python --backup
    auto-doc path/to/module.py --restore backup-20240101-120000-000
"""
import argparse
import os
import sys
from typing import List, Optional

from auto_doc_generator.constants import Messages
from auto_doc_generator.core.config import add_common_arguments, apply_common_arguments
from auto_doc_generator.core.exceptions import NoActiveFileError, UnsupportedLanguageError
from auto_doc_generator.core.sentry import init_sentry
from auto_doc_generator.features.documentation.backup import list_backups, restore_backup
from auto_doc_generator.features.documentation.docstring_generator import generate_docstrings_for_file
from auto_doc_generator.features.documentation.tools import generate_docstrings_for_file_tool
from auto_doc_generator.models.documentation import DocstringGenerationResult
from auto_doc_generator.utils.console_logger import console


def _create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="auto-doc",
        description="Insert docstring/JSDoc templates above undocumented functions and classes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Insert templates into a Python module
  auto-doc src/module.py

  # Preview what would be inserted into a TypeScript file
  auto-doc src/app.ts --dry-run

  # Force the language for a file without a known extension
  auto-doc bin/tool --language python

  # Back the file up first, then undo the change
  auto-doc src/module.py --backup
  auto-doc src/module.py --restore backup-20240101-120000-000
        """,
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Source file to process",
    )
    parser.add_argument(
        "--language", "-l",
        default=None,
        help="Language id (python, javascript, typescript). Detected from the file extension by default",
    )
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Show the templates that would be inserted without writing the file",
    )
    parser.add_argument(
        "--backup", "-b",
        action="store_true",
        help="Back the file up before rewriting it",
    )
    parser.add_argument(
        "--restore",
        metavar="BACKUP_ID",
        default=None,
        help="Restore the file from a backup taken with --backup",
    )
    parser.add_argument(
        "--list-backups",
        action="store_true",
        help="List backups taken in the file's directory",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output results as JSON instead of formatted text",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print errors",
    )
    add_common_arguments(parser)
    return parser


def _print_result(result: DocstringGenerationResult) -> None:
    if result.dry_run:
        for insertion in result.insertions:
            console.header(f"{insertion.declaration.name} (line {insertion.line_number + 1})")
            console.log(insertion.template)
        console.log()

    for failure in result.failures:
        console.warning(f"{failure.name} (line {failure.line_number + 1}): {failure.error}")

    if result.backup_id:
        console.log(f"Backup: {result.backup_id}")

    console.success(result.message)


def _list_backups(file_path: Optional[str]) -> int:
    folder = os.path.dirname(os.path.abspath(file_path)) if file_path else os.getcwd()
    backups = list_backups(folder)
    if not backups:
        console.log("No backups found.")
    for entry in backups:
        console.log(f"{entry['backup_id']}  {entry['original']}")
    return 0


def _restore(file_path: Optional[str], backup_id: str) -> int:
    folder = os.path.dirname(os.path.abspath(file_path)) if file_path else os.getcwd()
    outcome = restore_backup(backup_id, folder)
    if not outcome["success"]:
        for err in outcome["errors"]:
            console.error(err)
        return 1
    console.success(f"Restored {outcome['restored_file']}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    console.set_quiet(args.quiet)
    apply_common_arguments(args)
    init_sentry(component="cli")

    if args.restore:
        return _restore(args.file, args.restore)
    if args.list_backups:
        return _list_backups(args.file)

    try:
        if args.json:
            response = generate_docstrings_for_file_tool(
                file_path=args.file,
                language=args.language,
                dry_run=args.dry_run,
                backup=args.backup,
            )
            console.json(response)
            return 1 if response["failures"] else 0

        result = generate_docstrings_for_file(
            file_path=args.file,
            language=args.language,
            dry_run=args.dry_run,
            backup=args.backup,
        )
    except NoActiveFileError:
        console.error(Messages.NO_ACTIVE_FILE)
        return 1
    except UnsupportedLanguageError as e:
        console.error(str(e))
        return 1
    except (OSError, UnicodeDecodeError) as e:
        console.error(f"Failed to process {args.file}: {e}")
        return 1

    _print_result(result)
    return 1 if result.failures else 0


if __name__ == "__main__":
    sys.exit(main())
