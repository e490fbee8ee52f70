#!/usr/bin/env python3
"""
generate_defines.py - Go constants generator entry point

Generates the Go enum constants for libheif from its installed headers.

Usage:
    python scripts/generate_defines.py <filename.go> [--header PATH] [--version-header PATH]
"""

import argparse
import os
import sys

# Add scripts directory to path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)

from enum_gen import GeneratorError
from bindings import libheif


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate Go constants for libheif enums')
    parser.add_argument('output', help='Go file to write')
    parser.add_argument('--header', default=libheif.HEADER_FILE,
                        help=f'Path to heif.h (default: {libheif.HEADER_FILE})')
    parser.add_argument('--version-header', default=libheif.VERSION_HEADER_FILE,
                        help=f'Path to heif_version.h (default: {libheif.VERSION_HEADER_FILE})')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not print progress')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    gen = libheif.create(
        header_path=args.header,
        version_header_path=args.version_header,
        verbose=not args.quiet,
    )
    try:
        gen.write(args.output)
    except (GeneratorError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
