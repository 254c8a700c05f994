#!/usr/bin/env python3

"""
Tiled → Godot TileSet exporter

Usage:
    python -m tres_exporter <tileset.tsx> [output.tres]

Options:
    --project-root DIR    Godot project root, for the res:// image path
    --relative-path PATH  Image folder inside the project (overrides root)
    --format NAME         Registered export format (default: Godot)
    -v / -d               Verbose / debug output
"""

import argparse
import sys
from pathlib import Path

from tsx_manager import Property, Tileset

from .host import formats
from .logging_config import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Export a Tiled tileset (.tsx) to a Godot 3 TileSet resource (.tres)"
    )
    parser.add_argument("tileset", help="Input .tsx file")
    parser.add_argument("output", nargs="?", default=None,
                        help="Output file (default: tileset path with the format's extension)")
    parser.add_argument("--project-root", default=None,
                        help="Godot project root (default: tileset 'projectRoot' property)")
    parser.add_argument("--relative-path", default=None,
                        help="Image folder inside the Godot project "
                             "(default: tileset 'relativePath' property)")
    parser.add_argument("--format", default="Godot",
                        help=f"Export format ({', '.join(formats.names())})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show progress information")
    parser.add_argument("--debug", "-d", action="store_true",
                        help="Show debug information (implies verbose)")
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.debug)

    source_path = Path(args.tileset)
    if not source_path.exists():
        print(f"Error: File '{source_path}' not found")
        sys.exit(1)

    tileset_format = formats.get(args.format)
    if tileset_format is None:
        print(f"Error: Unknown format '{args.format}'")
        sys.exit(1)

    output_path = Path(args.output) if args.output else \
        source_path.with_suffix(f".{tileset_format.extension}")

    try:
        tileset = Tileset.load(source_path)
        # Command line settings win over the tileset's own properties
        if args.project_root is not None:
            tileset.properties["projectRoot"] = Property("projectRoot", value=args.project_root)
        if args.relative_path is not None:
            tileset.properties["relativePath"] = Property("relativePath", value=args.relative_path)
        tileset_format.write(tileset, str(output_path))
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Exported {tileset.name} to {output_path}")


if __name__ == "__main__":
    main()
