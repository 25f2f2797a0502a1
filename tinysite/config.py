from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

DEFAULT_SITE_URL = "https://tomsik.cz"


@dataclass(frozen=True)
class SiteConfig:
    posts_dir: Path = Path("posts")
    public_dir: Path = Path("public")
    dist_dir: Path = Path("dist")
    site_url: str = DEFAULT_SITE_URL
    template_path: Path = Path("template.html")
    site_title: str = "Blog"
    highlight_style: str = "default"

    @classmethod
    def from_mapping(cls, data: dict) -> "SiteConfig":
        def value(key: str, default: object) -> object:
            found = data.get(key)
            return default if found is None else found

        return cls(
            posts_dir=Path(str(value("posts", cls.posts_dir))),
            public_dir=Path(str(value("public", cls.public_dir))),
            dist_dir=Path(str(value("output", cls.dist_dir))),
            site_url=str(value("site_url", cls.site_url)),
            template_path=Path(str(value("template", cls.template_path))),
            site_title=str(value("site_title", cls.site_title)),
            highlight_style=str(value("highlight_style", cls.highlight_style)),
        )


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"JSON config must be a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    return data
