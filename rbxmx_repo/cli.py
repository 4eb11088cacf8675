"""CLI for rbxmx2repo."""

import argparse
import os
import sys

from rbxmx_repo.document_reader import DocumentReader, DocumentReadError
from rbxmx_repo.domain.constants import PLAIN_EXTENSION, SCRIPT_EXTENSIONS
from rbxmx_repo.domain.models import ExportOptions, ExportResult
from rbxmx_repo.output.file_writer import ExportError, ensure_dir
from rbxmx_repo.output.script_exporter import ScriptExporter


def export_document(input_path: str, options: ExportOptions) -> ExportResult:
    """Main orchestration: document -> instance tree -> files + manifest."""
    ensure_dir(options.out_dir)
    parsed = DocumentReader().read(input_path)
    return ScriptExporter().export(parsed, options)


def main():
    parser = argparse.ArgumentParser(prog='rbxmx2repo', description='Roblox XML model to repository exporter')
    subparsers = parser.add_subparsers(dest='command')

    # export command
    export_parser = subparsers.add_parser('export', help='Export scripts (and optionally models) to a directory')
    export_parser.add_argument('input', help='Path to .rbxmx or .rbxlx file')
    export_parser.add_argument('--out', required=True, help='Output directory')
    export_parser.add_argument('--scripts-only', action=argparse.BooleanOptionalAction, default=True,
                               help='Export scripts only (default); --no-scripts-only implies --keep-models')
    export_parser.add_argument('--keep-models', action='store_true', help='Also export top-level models to assets/')
    export_parser.add_argument('--plain-lua', action='store_true', help='Use .lua for every script class')
    export_parser.add_argument('--no-pretty', action='store_true', help='Disable manifest pretty printing')

    # classes command
    subparsers.add_parser('classes', help='List script classes and their file extensions')

    args = parser.parse_args()

    if args.command == 'export':
        input_path = os.path.abspath(args.input)
        if not os.path.isfile(input_path):
            print(f"Error: {input_path} not found", file=sys.stderr)
            sys.exit(1)

        options = ExportOptions(
            out_dir=os.path.abspath(args.out),
            keep_models=args.keep_models or not args.scripts_only,
            plain_lua=args.plain_lua,
            pretty=not args.no_pretty,
        )

        print(f"Parsing {input_path}...")
        try:
            result = export_document(input_path, options)
        except (DocumentReadError, ExportError) as e:
            print(f"rbxmx2repo failed: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Done! Exported {result.scripts_exported} scripts ({result.assets_exported} assets)")
        print(f"Output: {result.output_dir}")

    elif args.command == 'classes':
        for class_name, extension in sorted(SCRIPT_EXTENSIONS.items()):
            print(f"  {class_name:<14} {extension}  (plain: {PLAIN_EXTENSION})")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
