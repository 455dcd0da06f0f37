import os
import pandas as pd

from .huffman import code_lengths, average_length
from .bits_utils import bits_entropy_stats, source_entropy


def code_table_frame(table, counts) -> pd.DataFrame:
    """Tabla de códigos como DataFrame: símbolo, frecuencia, código, longitud."""
    lengths = code_lengths(table)
    rows = [(repr(s), counts.get(s, 0), c, lengths[s]) for s, c in table.items()]
    df = pd.DataFrame(rows, columns=["Símbolo", "Frecuencia", "Código", "Longitud"])
    # más frecuentes primero; empates por longitud y código
    return df.sort_values(["Frecuencia", "Longitud", "Código"], ascending=[False, True, True]).reset_index(drop=True)


def save_code_table_csv(out_dir: str, table, counts) -> pd.DataFrame:
    df = code_table_frame(table, counts)
    df.to_csv(os.path.join(out_dir, "code_table.csv"), index=False)
    return df


METRICS_COLUMNS = [
    "Caso",
    "Símbolos",
    "Alfabeto",
    "Entropía fuente [bits/símbolo]",
    "Longitud media [bits/símbolo]",
    "Eficiencia",
    "Bits codificados",
    "P(0)",
    "P(1)",
    "Entropía [bits/bit]",
]


def metrics_row(name: str, table, counts, bits: str) -> tuple:
    """
    Fila de métricas de una codificación:
    entropía de la fuente H, longitud media L, eficiencia H/L y estadística del flujo de bits.
    """
    lavg = average_length(table, counts)
    h = source_entropy(counts)
    p0, p1, hb, _ = bits_entropy_stats(bits)
    eff = h / lavg if lavg > 0 else 0.0
    return (name, sum(counts.values()), len(counts), h, lavg, eff, len(bits), p0, p1, hb)


def save_metrics_csv(out_dir: str, rows) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=METRICS_COLUMNS)
    df.to_csv(os.path.join(out_dir, "metrics.csv"), index=False)
    return df


def _fenced(text: str) -> list:
    # la valla tiene más backticks que cualquier racha del texto
    longest = run = 0
    for ch in text:
        run = run + 1 if ch == "`" else 0
        longest = max(longest, run)
    fence = "`" * max(3, longest + 1)
    return [fence, text, fence]


def write_markdown(out_dir: str, text: str, df: pd.DataFrame, lavg: float, h: float, figures: bool = False):
    lines = [
        "# Código de Huffman",
        "",
        "Texto:",
        "",
        *_fenced(text),
        "",
        "## 1) Tabla de códigos",
        "",
        "| Símbolo | Frecuencia | Código | Longitud |",
        "|---|---|---|---|",
    ]
    for sym, freq, code, length in df.itertuples(index=False):
        # el repr del símbolo puede traer '|' o '`'
        cell = sym.replace("|", "\\|")
        lines.append(f"| `` {cell} `` | {freq} | `{code}` | {length} |")
    lines += [
        "",
        "## 2) Métricas",
        f"- Entropía de la fuente: {h:.4f} bits/símbolo",
        f"- Longitud media: {lavg:.4f} bits/símbolo",
        "",
        "Ver **metrics.csv**.",
    ]
    if figures:
        lines += [
            "",
            "## 3) Figuras",
            "![bits_huffman](figures/bits_hist_huffman.png)",
            "![code_lengths](figures/code_lengths.png)",
        ]
    with open(os.path.join(out_dir, "report.md"), "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
