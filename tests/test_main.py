import pytest

from huffcode.main import main, run_demo, DEFAULT_TEXT


def test_run_demo_roundtrip():
    res = run_demo("aaabbc")
    assert res["decoded"] == "aaabbc"
    assert res["bits"] == "000111110"
    assert res["lavg"] == pytest.approx(1.5)


def test_main_default_text(tmp_path, capsys):
    main(["--out", str(tmp_path)])
    out = capsys.readouterr().out
    assert f"text: {DEFAULT_TEXT}" in out
    assert "ok: True" in out
    assert (tmp_path / "code_table.csv").exists()
    assert (tmp_path / "metrics.csv").exists()
    assert (tmp_path / "report.md").exists()


def test_main_no_report_and_tree(tmp_path, capsys):
    out_dir = tmp_path / "o"
    main(["aaabbc", "--out", str(out_dir), "--no-report", "--show-tree"])
    out = capsys.readouterr().out
    assert "(*:6 ('a':3) (*:3 ('c':1) ('b':2)))" in out
    assert not out_dir.exists()


def test_main_from_file_with_figures(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("abracadabra", encoding="utf-8")
    main(["--file", str(src), "--out", str(tmp_path), "--figures"])
    assert "ok: True" in capsys.readouterr().out
    assert (tmp_path / "figures" / "bits_hist_huffman.png").exists()
    assert (tmp_path / "figures" / "code_lengths.png").exists()


def test_main_empty_text_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["", "--no-report"])
    assert exc.value.code == 1
    assert "error:" in capsys.readouterr().err
