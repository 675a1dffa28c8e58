#!/usr/bin/env python3
"""
File tree command line.

Usage:
    filetree layout PATH [--y-scale 1.0] [--labels]
    filetree serve [--host 127.0.0.1] [--port 8000]
"""

import argparse
import sys

from filetree.services.errors import InvalidRootError, LayoutError, ScanError
from filetree.services.tree_service import load_tree_layout


def layout(args) -> int:
    """Print the laid-out tree for a directory as JSON."""
    try:
        result = load_tree_layout(args.path, y_scale=args.y_scale, draw_labels=args.labels)
    except InvalidRootError:
        print("Invalid path.", file=sys.stderr)
        return 1
    except (ScanError, LayoutError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=args.indent))
    return 0


def serve(args) -> int:
    """Run the HTTP/WebSocket service."""
    import uvicorn

    uvicorn.run("filetree.main:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="filetree", description="Lay out a directory tree as a node-link diagram")
    subparsers = parser.add_subparsers(dest="command", required=True)

    layout_parser = subparsers.add_parser("layout", help="Print the laid-out tree as JSON")
    layout_parser.add_argument("path", help="Root folder path")
    layout_parser.add_argument("--y-scale", type=float, default=1.0, help="Vertical scale factor")
    layout_parser.add_argument("--labels", action="store_true", help="Size leaf slots to fit labels")
    layout_parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    layout_parser.set_defaults(func=layout)

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.set_defaults(func=serve)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
