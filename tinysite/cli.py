from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from .config import SiteConfig, load_config
from .pages import build_index, build_sitemap, load_post, sort_posts
from .render import copy_static, highlight_css, read_template, write_text
from .utils import reset_output_dir


def list_post_files(posts_dir: Path) -> list[Path]:
    if not posts_dir.exists():
        return []
    return sorted(path for path in posts_dir.iterdir() if path.is_file() and path.name.endswith(".md"))


def build_site(config: SiteConfig, project_root: Optional[Path] = None) -> list[dict]:
    output_dir = config.dist_dir
    project_root = project_root or Path.cwd()

    reset_output_dir(output_dir, project_root)

    if config.public_dir.exists():
        copy_static(config.public_dir, output_dir)

    if not config.template_path.exists():
        print(f"Template not found: {config.template_path}", file=sys.stderr)
        sys.exit(1)
    template = read_template(config.template_path)

    posts = []
    for md_file in list_post_files(config.posts_dir):
        post = load_post(md_file, template)
        write_text(output_dir / "posts" / post["slug"] / "index.html", post["html"])
        posts.append(post)
        print(f"Built: {post['slug']}")

    posts = sort_posts(posts)
    write_text(output_dir / "index.html", build_index(posts, template, config.site_title))
    write_text(output_dir / "sitemap.xml", build_sitemap(posts, config.site_url))
    print(f"Built: index ({len(posts)} posts)")

    css_path = output_dir / "highlight.css"
    if config.highlight_style and not css_path.exists():
        write_text(css_path, highlight_css(config.highlight_style))
    return posts


def main(argv: Optional[list[str]] = None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    defaults = SiteConfig.from_mapping(load_config(Path(pre_args.config)))

    parser = argparse.ArgumentParser(description="Build a static blog from a directory of Markdown posts.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--posts", default=str(defaults.posts_dir), help="Directory containing Markdown posts.")
    parser.add_argument(
        "--public",
        default=str(defaults.public_dir),
        help="Directory of static assets copied into the output root.",
    )
    parser.add_argument("--output", default=str(defaults.dist_dir), help="Output directory for the site.")
    parser.add_argument("--template", default=str(defaults.template_path), help="HTML page template.")
    parser.add_argument("--site-url", default=defaults.site_url, help="Public site URL used for the sitemap.")
    parser.add_argument("--site-title", default=defaults.site_title, help="Title of the index page.")
    parser.add_argument(
        "--highlight-style",
        default=defaults.highlight_style,
        help="Pygments style for highlight.css (empty to skip).",
    )
    args = parser.parse_args(argv)

    config = SiteConfig(
        posts_dir=Path(args.posts),
        public_dir=Path(args.public),
        dist_dir=Path(args.output),
        site_url=args.site_url,
        template_path=Path(args.template),
        site_title=args.site_title,
        highlight_style=args.highlight_style,
    )
    start = time.perf_counter()
    build_site(config)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {args.output}")
