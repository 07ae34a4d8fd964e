import pytest
from jinja2 import TemplateNotFound, TemplateSyntaxError

from friendgraph.models import Friend
from friendgraph.render import TemplateRenderer


def _write(directory, name, text):
    (directory / name).write_text(text, encoding="utf-8")


def test_renders_template_by_file_name(tmp_path):
    _write(tmp_path, "login.html", "<title>{{ Title }}</title>")
    renderer = TemplateRenderer(tmp_path)
    assert renderer.render("login.html", {"Title": "ログイン"}) == "<title>ログイン</title>"


def test_escapes_html_in_values(tmp_path):
    _write(tmp_path, "page.html", "<h1>{{ Title }}</h1>")
    renderer = TemplateRenderer(tmp_path)
    assert renderer.render("page.html", {"Title": "<b>x</b>"}) == "<h1>&lt;b&gt;x&lt;/b&gt;</h1>"


def test_iterates_over_friends(tmp_path):
    _write(
        tmp_path,
        "friend_list.html",
        "{% for f in Friends %}{{ f.id }}:{{ f.name }};{% endfor %}",
    )
    renderer = TemplateRenderer(tmp_path)
    friends = [Friend(id=8, name="ダイスケ"), Friend(id=7, name="ミサキ")]
    assert renderer.render("friend_list.html", {"Friends": friends}) == "8:ダイスケ;7:ミサキ;"


def test_only_html_files_are_loaded(tmp_path):
    _write(tmp_path, "index.html", "index")
    _write(tmp_path, "notes.txt", "notes")
    renderer = TemplateRenderer(tmp_path)
    assert renderer.template_names == ["index.html"]
    with pytest.raises(TemplateNotFound):
        renderer.render("notes.txt", {})


def test_unknown_template_raises(tmp_path):
    _write(tmp_path, "index.html", "index")
    renderer = TemplateRenderer(tmp_path)
    with pytest.raises(TemplateNotFound):
        renderer.render("missing.html", {})


def test_templates_can_include_each_other(tmp_path):
    _write(tmp_path, "header.html", "[{{ Title }}]")
    _write(tmp_path, "index.html", "{% include 'header.html' %}body")
    renderer = TemplateRenderer(tmp_path)
    assert renderer.render("index.html", {"Title": "T"}) == "[T]body"


def test_directory_without_templates_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TemplateRenderer(tmp_path)


def test_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TemplateRenderer(tmp_path / "views")


def test_syntax_error_raises_at_load(tmp_path):
    _write(tmp_path, "broken.html", "{% for x in %}")
    with pytest.raises(TemplateSyntaxError):
        TemplateRenderer(tmp_path)