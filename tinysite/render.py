from __future__ import annotations

import shutil
from pathlib import Path

import markdown
from pygments.formatters import HtmlFormatter

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {"codehilite": {"css_class": "codehilite", "guess_lang": False}}


def markdown_to_html(body: str) -> str:
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    html_content = md.convert(body)
    md.reset()
    return html_content


def highlight_css(style: str) -> str:
    formatter = HtmlFormatter(style=style, cssclass="codehilite")
    return formatter.get_style_defs(".codehilite") + "\n"


def render_template(template: str, **context: str) -> str:
    output = template
    for key, value in context.items():
        if key != "content":
            output = output.replace(f"{{{{{key}}}}}", value)
    if "content" in context:
        output = output.replace("{{content}}", context["content"])
    return output


def read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(static_dir: Path, output_dir: Path) -> None:
    for item in static_dir.iterdir():
        dest = output_dir / item.name
        if item.is_dir():
            if dest.exists():
                shutil.rmtree(dest)
            shutil.copytree(item, dest)
        else:
            shutil.copy2(item, dest)
