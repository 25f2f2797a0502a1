"""Shared fixtures: a page template and a throwaway site layout"""

import pytest


TEMPLATE = """\
<!doctype html>
<html>
<head>
<title>{{title}}</title>
<meta name="description" content="{{description}}">
<link rel="canonical" href="{{url}}">
</head>
<body>
<time>{{date}}</time>
<main>{{content}}</main>
</body>
</html>
"""


@pytest.fixture(name="template")
def template_fixture():
    return TEMPLATE


@pytest.fixture(name="site")
def site_fixture(tmp_path, monkeypatch):
    """A project directory with template.html and an empty posts/ folder; cwd is moved there."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "template.html").write_text(TEMPLATE, encoding="utf-8")
    (tmp_path / "posts").mkdir()
    return tmp_path
