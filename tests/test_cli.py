import pytest

from domquery.cli import main


def test_select_by_tag(index_path, capsys):
    assert main([index_path, "--tag", "li"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["li#toc-Types.toc-item", "li#toc-Packages.toc-item"]


def test_select_by_id_with_full_text(index_path, capsys):
    assert main([index_path, "--id", "Types", "--full-text"]) == 0
    assert capsys.readouterr().out == "Enumerated types\n"


def test_select_by_class_and_render(index_path, capsys):
    assert main([index_path, "--class", "toc-text", "--render"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ['<span class="toc-text">Types</span>', '<span class="toc-text">Packages</span>']


def test_no_match(index_path, capsys):
    assert main([index_path, "--id", "nope"]) == 1
    assert capsys.readouterr().out == ""


def test_default_selects_document(index_path, capsys):
    assert main([index_path]) == 0
    assert capsys.readouterr().out == "document\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.html")]) == 2
    assert "domquery:" in capsys.readouterr().err


def test_log_level_is_case_insensitive(index_path, capsys):
    assert main([index_path, "--log-level", "error"]) == 0
    assert capsys.readouterr().out == "document\n"


def test_unknown_log_level_is_rejected(index_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([index_path, "--log-level", "LOUD"])
    assert excinfo.value.code == 2
    assert "--log-level" in capsys.readouterr().err
