from __future__ import annotations

import shutil
import sys
from pathlib import Path


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base
    return f"{base}/{path}"


def post_url(slug: str) -> str:
    return f"/posts/{slug}/"


def reset_output_dir(output_dir: Path, project_root: Path) -> None:
    if output_dir.exists():
        output_resolved = output_dir.resolve()
        root_resolved = project_root.resolve()
        if output_resolved == root_resolved:
            print("Refusing to clean project root.", file=sys.stderr)
            sys.exit(1)
        if not output_resolved.is_relative_to(root_resolved):
            print("Refusing to clean output directory outside project root.", file=sys.stderr)
            sys.exit(1)
        shutil.rmtree(output_dir)
    (output_dir / "posts").mkdir(parents=True)
