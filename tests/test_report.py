import pandas as pd
import pytest

from huffcode.huffman import build_code, encode
from huffcode.report import (
    METRICS_COLUMNS,
    code_table_frame,
    metrics_row,
    save_code_table_csv,
    save_metrics_csv,
    write_markdown,
)


def test_code_table_frame():
    _, code, counts = build_code("aaabbc")
    df = code_table_frame(code, counts)
    assert list(df.columns) == ["Símbolo", "Frecuencia", "Código", "Longitud"]
    assert df.iloc[0].tolist() == ["'a'", 3, "0", 1]
    assert df["Frecuencia"].sum() == 6


def test_metrics_row():
    _, code, counts = build_code("aaabbc")
    bits = encode(code, "aaabbc")
    row = dict(zip(METRICS_COLUMNS, metrics_row("Huffman", code, counts, bits)))
    assert row["Símbolos"] == 6
    assert row["Alfabeto"] == 3
    assert row["Longitud media [bits/símbolo]"] == pytest.approx(1.5)
    assert row["Entropía fuente [bits/símbolo]"] == pytest.approx(1.459148, abs=1e-5)
    # Huffman nunca baja de la entropía
    assert 0 < row["Eficiencia"] <= 1
    assert row["Bits codificados"] == 9
    assert row["P(0)"] + row["P(1)"] == pytest.approx(1.0)


def test_csv_and_markdown(tmp_path):
    _, code, counts = build_code("aaabbc")
    bits = encode(code, "aaabbc")
    df = save_code_table_csv(str(tmp_path), code, counts)
    save_metrics_csv(str(tmp_path), [metrics_row("Huffman", code, counts, bits)])
    write_markdown(str(tmp_path), "aaabbc", df, 1.5, 1.459)

    back = pd.read_csv(tmp_path / "code_table.csv", dtype={"Código": str})
    assert back["Código"].tolist() == df["Código"].tolist()
    metrics = pd.read_csv(tmp_path / "metrics.csv")
    assert list(metrics.columns) == METRICS_COLUMNS
    assert metrics.loc[0, "Longitud media [bits/símbolo]"] == 1.5
    md = (tmp_path / "report.md").read_text(encoding="utf-8")
    assert "Longitud media: 1.5000" in md
    assert "figures/" not in md


def test_markdown_keeps_backticks_and_newlines(tmp_path):
    text = "a`b``c\n| x"
    _, code, counts = build_code(text)
    df = code_table_frame(code, counts)
    write_markdown(str(tmp_path), text, df, 1.0, 1.0)
    lines = (tmp_path / "report.md").read_text(encoding="utf-8").splitlines()

    # el texto va íntegro dentro de una valla más larga que sus rachas de backticks
    start = lines.index("```")
    assert lines[start + 1:start + 3] == ["a`b``c", "| x"]
    assert lines[start + 3] == "```"
    # las filas de la tabla no se rompen con '|'
    rows = [l for l in lines if l.startswith("| ``")]
    assert len(rows) == len(code)
    assert all(l.replace("\\|", "").count("|") == 5 for l in rows)
