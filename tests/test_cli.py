from pathlib import Path

import pytest
import yaml

from topus.cli import build_parser, main
from topus.dom import Document


def test_render_prints_default_document(capsys):
    main(["render"])
    out = capsys.readouterr().out
    assert out == Document.default().render() + "\n"


def test_render_with_title_and_custom_element(capsys):
    main(["render", "--title", "Topus", "--define", "my-custom"])
    out = capsys.readouterr().out
    assert "<title>Topus</title><script>class MyCustom" in out


def test_render_rejects_bad_custom_element(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["render", "--define", "nodash"])
    assert excinfo.value.code == 1
    assert "nodash" in capsys.readouterr().err


def test_build_single_document(tmp_path: Path, capsys):
    target = tmp_path / "index.html"
    main(["build", "--out", str(target), "--title", "Home"])
    assert "<title>Home</title>" in target.read_text(encoding="utf-8")
    assert f"successfully wrote to {target}" in capsys.readouterr().out


def test_build_from_config(tmp_path: Path, capsys):
    config = tmp_path / "site.yaml"
    config.write_text(
        yaml.safe_dump({"pages": [{"output": "a.html"}, {"output": "b/index.html", "title": "B"}]}),
        encoding="utf-8",
    )
    out_dir = tmp_path / "dist"
    main(["build", "--config", str(config), "--out", str(out_dir)])

    assert (out_dir / "a.html").exists()
    assert "<title>B</title>" in (out_dir / "b" / "index.html").read_text(encoding="utf-8")
    assert f"Built 2 file(s) into {out_dir}" in capsys.readouterr().out


def test_build_with_invalid_config(tmp_path: Path):
    config = tmp_path / "site.yaml"
    config.write_text(yaml.safe_dump({"pages": [{"title": "no output"}]}), encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["build", "--config", str(config), "--out", str(tmp_path / "dist")])
    assert "Invalid site config" in str(excinfo.value.code)


def test_build_reports_write_failure(tmp_path: Path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["build", "--out", str(blocker / "index.html")])
    assert excinfo.value.code == 1
    assert "couldn't write to" in capsys.readouterr().err


def test_parser_requires_out_for_build():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["build"])


def test_build_rejects_document_options_with_config(tmp_path: Path, capsys):
    config = tmp_path / "site.yaml"
    config.write_text(yaml.safe_dump({"pages": [{"output": "a.html"}]}), encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["build", "--config", str(config), "--out", str(tmp_path / "dist"), "--title", "Ignored"])
    assert excinfo.value.code == 2
    assert "cannot be combined with --config" in capsys.readouterr().err
    assert not (tmp_path / "dist").exists()
