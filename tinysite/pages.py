from __future__ import annotations

from pathlib import Path

from .content import extract_description, parse_front_matter, slug_from_path
from .render import markdown_to_html, render_template
from .utils import join_url, post_url

INDEX_DESCRIPTION = "Latest posts"
SITEMAP_ROOT_CHANGEFREQ = "weekly"
SITEMAP_ROOT_PRIORITY = "1.0"
SITEMAP_POST_CHANGEFREQ = "monthly"
SITEMAP_POST_PRIORITY = "0.8"


def build_post(filename: str | Path, text: str, template: str) -> dict:
    meta, body = parse_front_matter(text)
    content = markdown_to_html(body)
    slug = slug_from_path(filename)
    url = post_url(slug)
    description = meta.get("description") or extract_description(body)
    title = meta.get("title") or slug
    date = meta.get("date") or ""
    page = render_template(
        template,
        title=title,
        date=date,
        description=description,
        url=url,
        content=content,
    )
    return {
        "slug": slug,
        "meta": meta,
        "title": title,
        "date": date,
        "description": description,
        "url": url,
        "content": content,
        "html": page,
    }


def load_post(path: Path, template: str) -> dict:
    raw_text = path.read_text(encoding="utf-8-sig")
    return build_post(path.name, raw_text, template)


def sort_posts(posts: list[dict]) -> list[dict]:
    return sorted(posts, key=lambda p: p["date"], reverse=True)


def build_post_list(posts: list[dict]) -> str:
    items = [
        f'<li><a href="posts/{post["slug"]}/">{post["title"]}</a> <time>{post["date"]}</time></li>'
        for post in posts
    ]
    return '<ul class="post-list">\n' + "\n".join(items) + "\n</ul>"


def build_index(posts: list[dict], template: str, site_title: str = "Blog") -> str:
    return render_template(
        template,
        title=site_title,
        date="",
        description=INDEX_DESCRIPTION,
        url="/",
        content=build_post_list(sort_posts(posts)),
    )


def build_sitemap(posts: list[dict], site_url: str) -> str:
    site_url = site_url.rstrip("/")
    items = [
        "\n".join(
            [
                "<url>",
                f"<loc>{site_url}/</loc>",
                f"<changefreq>{SITEMAP_ROOT_CHANGEFREQ}</changefreq>",
                f"<priority>{SITEMAP_ROOT_PRIORITY}</priority>",
                "</url>",
            ]
        )
    ]
    for post in posts:
        lines = ["<url>", f"<loc>{join_url(site_url, post['url'])}</loc>"]
        if post["date"]:
            lines.append(f"<lastmod>{post['date']}</lastmod>")
        lines.extend(
            [
                f"<changefreq>{SITEMAP_POST_CHANGEFREQ}</changefreq>",
                f"<priority>{SITEMAP_POST_PRIORITY}</priority>",
                "</url>",
            ]
        )
        items.append("\n".join(lines))
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
            "\n".join(items),
            "</urlset>",
            "",
        ]
    )
