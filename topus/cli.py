"""Command-line interface for topus."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .custom_element import define
from .dom import DEFAULT_TITLE, Document
from .errors import IOFailure, MalformedBuilderInput
from .io_utils import warn
from .models import SiteConfig
from .site import build_site, load_site_config
from .util_fs import build


def _document_from_args(args: argparse.Namespace) -> Document:
    head = [define(tag_name) for tag_name in args.define or []]
    title = args.title if args.title is not None else DEFAULT_TITLE
    return Document.from_title(title, head=head)


def _load_config(path: Path) -> SiteConfig:
    try:
        return load_site_config(path)
    except ValidationError as exc:
        raise SystemExit(f"Invalid site config in {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SystemExit(f"Invalid YAML in {path}: {exc}") from exc
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc


def _handle_render(args: argparse.Namespace) -> None:
    try:
        document = _document_from_args(args)
    except MalformedBuilderInput as exc:
        warn(str(exc))
        raise SystemExit(1) from exc
    sys.stdout.write(document.render())
    sys.stdout.write("\n")


def _handle_build(args: argparse.Namespace) -> None:
    out_path = Path(args.out)

    try:
        if args.config:
            written = build_site(_load_config(Path(args.config)), out_path)
        else:
            written = [build(_document_from_args(args), out_path)]
    except (MalformedBuilderInput, IOFailure) as exc:
        warn(str(exc))
        raise SystemExit(1) from exc

    for path in written:
        print(f"successfully wrote to {path}")
    print(f"Built {len(written)} file(s) into {out_path}")


def _add_document_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--title",
        default=None,
        help=f"Text of the <title> element (default: {DEFAULT_TITLE}).",
    )
    parser.add_argument(
        "--define",
        action="append",
        help="Register a dashed custom element tag in <head> (repeatable).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="topus",
        description="Build HTML documents from typed node trees.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Print the default document.",
        description="Render the default document skeleton to stdout.",
    )
    _add_document_arguments(render_parser)
    render_parser.set_defaults(func=_handle_render)

    build_parser = subparsers.add_parser(
        "build",
        help="Write documents to disk.",
        description=(
            "Write the default document to --out, or with --config build every "
            "page of a site YAML under the --out directory."
        ),
    )
    build_parser.add_argument(
        "--config",
        default=None,
        help="Path to a site YAML file with a list of pages.",
    )
    build_parser.add_argument(
        "--out",
        required=True,
        help="Output file, or output directory when --config is given.",
    )
    _add_document_arguments(build_parser)
    build_parser.set_defaults(func=_handle_build)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if getattr(args, "config", None) and (args.title is not None or args.define):
        parser.error("--title and --define cannot be combined with --config; set them per page in the site YAML")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
