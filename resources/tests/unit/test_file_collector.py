"""
Unit tests for collecting and rendering generated files.
"""

import os

import pytest

from statelydb_mcp.services.stately.collector import (
    CollectedFile,
    collect_files,
    language_tag,
    render_files,
)


@pytest.mark.parametrize("path,tag", [
    ("index.ts", "typescript"),
    ("lib/util.js", "javascript"),
    ("pkg/schema.py", "python"),
    ("schema.rb", "ruby"),
    ("main.go", "go"),
    ("package.json", "json"),
    ("README.md", "markdown"),
    ("go.mod", ""),
    ("Makefile", ""),
])
def test_language_tag(path, tag):
    assert language_tag(path) == tag


def test_missing_directory_yields_nothing(tmp_path):
    assert collect_files(tmp_path / "missing") == []


def test_empty_directory_yields_nothing(tmp_path):
    assert collect_files(tmp_path) == []


def test_collects_nested_files_with_relative_paths(tmp_path):
    (tmp_path / "schema").mkdir()
    (tmp_path / "schema" / "deep").mkdir()
    (tmp_path / "index.ts").write_text("export {};")
    (tmp_path / "schema" / "types.ts").write_text("type A = 1;")
    (tmp_path / "schema" / "deep" / "x.json").write_text("{}")

    files = {f.path: f for f in collect_files(tmp_path)}

    assert set(files) == {"index.ts", "schema/types.ts", "schema/deep/x.json"}
    assert files["schema/types.ts"].content == "type A = 1;"
    assert files["schema/deep/x.json"].size == 2
    assert not files["index.ts"].is_binary


def test_binary_files_are_kept_without_content(tmp_path):
    (tmp_path / "blob.bin").write_bytes(b"\xff\xfe\x00\x01")

    [collected] = collect_files(tmp_path)

    assert collected.is_binary
    assert collected.content is None
    assert collected.size == 4


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinks_are_skipped(tmp_path):
    outside = tmp_path / "outside.txt"
    outside.write_text("secret")
    root = tmp_path / "out"
    root.mkdir()
    (root / "real.go").write_text("package x")
    try:
        (root / "link.txt").symlink_to(outside)
        (root / "linkdir").symlink_to(tmp_path, target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert [f.path for f in collect_files(root)] == ["real.go"]


def test_render_files_labels_and_tags_each_file():
    files = [
        CollectedFile(path="main.go", content="package main", size=12),
        CollectedFile(path="README.md", content="# Hi", size=4),
    ]

    text = render_files(files, "go")

    assert text == (
        "Generated the following files for language go:\n\n"
        "File: main.go\nContents:\n```go\npackage main\n```\n\n"
        "File: README.md\nContents:\n```markdown\n# Hi\n```"
    )


def test_render_files_unknown_extension_and_binary():
    files = [
        CollectedFile(path="go.mod", content="module x", size=8),
        CollectedFile(path="logo.png", content=None, size=1024),
    ]

    text = render_files(files, "go")

    assert "File: go.mod\nContents:\n```\nmodule x\n```" in text
    assert "File: logo.png\nContents:\n(binary file, 1024 bytes, contents omitted)" in text
