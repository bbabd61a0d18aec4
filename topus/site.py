"""Build documents described by a YAML site config."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .custom_element import define
from .dom import Document
from .errors import IOFailure
from .io_utils import read_yaml
from .models import PageSpec, SiteConfig, to_nodes
from .util_fs import build, ensure_dir


def load_site_config(path: Path) -> SiteConfig:
    if not path.exists():
        raise FileNotFoundError(f"Site config not found: {path}")
    data = read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping with a 'pages' list.")
    return SiteConfig.model_validate(data)


def page_document(page: PageSpec) -> Document:
    head = to_nodes(page.head) + [define(tag_name) for tag_name in page.custom_elements]
    return Document.from_title(page.title, head=head, body=to_nodes(page.body))


def build_site(config: SiteConfig, out_root: Path) -> List[Path]:
    try:
        ensure_dir(out_root)
    except OSError as exc:
        raise IOFailure(out_root, exc) from exc
    written: List[Path] = []
    for page in config.pages:
        written.append(build(page_document(page), out_root / page.output))
    return written


__all__ = ["build_site", "load_site_config", "page_document"]
