"""Unit tests for config.py"""

import json
from pathlib import Path

import pytest

from tinysite.config import DEFAULT_SITE_URL, SiteConfig, load_config


def test_defaults():
    config = SiteConfig()
    assert config.posts_dir == Path("posts")
    assert config.public_dir == Path("public")
    assert config.dist_dir == Path("dist")
    assert config.template_path == Path("template.html")
    assert config.site_url == DEFAULT_SITE_URL
    assert config.site_title == "Blog"


def test_from_mapping_overrides():
    config = SiteConfig.from_mapping({"posts": "content", "output": "site", "site_url": "https://example.com"})
    assert config.posts_dir == Path("content")
    assert config.dist_dir == Path("site")
    assert config.site_url == "https://example.com"
    assert config.public_dir == Path("public")


def test_from_mapping_keeps_empty_strings():
    """An explicit empty value is kept, only missing keys fall back."""
    assert SiteConfig.from_mapping({"highlight_style": ""}).highlight_style == ""


def test_load_config_missing_file(tmp_path):
    assert load_config(tmp_path / "site.toml") == {}


def test_load_config_toml(tmp_path):
    path = tmp_path / "site.toml"
    path.write_text('posts = "content"\nsite_title = "Notes"\n', encoding="utf-8")
    assert load_config(path) == {"posts": "content", "site_title": "Notes"}


def test_load_config_yaml(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("output: public_html\n", encoding="utf-8")
    assert load_config(path) == {"output": "public_html"}


def test_load_config_empty_yaml(tmp_path):
    path = tmp_path / "site.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_load_config_json(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps({"template": "layout.html"}), encoding="utf-8")
    assert load_config(path) == {"template": "layout.html"}


@pytest.mark.parametrize(
    "name, text",
    [
        ("site.toml", "posts = "),
        ("site.yaml", "- a\n- b\n"),
        ("site.json", "{not json"),
        ("site.json", "[1, 2]"),
    ],
)
def test_load_config_invalid_exits(tmp_path, capsys, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        load_config(path)
    assert exc.value.code == 1
    assert str(path) in capsys.readouterr().err
