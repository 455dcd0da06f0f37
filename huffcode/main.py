import argparse
import os

# Backend no interactivo para Matplotlib (solo se guardan figuras)
os.environ.setdefault("MPLBACKEND", "Agg")

from .huffman import (
    HuffmanError,
    build_code,
    encode,
    decode_text,
    format_tree,
    average_length,
)
from .bits_utils import source_entropy
from .plots import plot_hist_bits, plot_code_lengths
from .report import code_table_frame, metrics_row, save_code_table_csv, save_metrics_csv, write_markdown

DEFAULT_TEXT = "hello, wired world"


def ensure_dirs(out_dir: str) -> str:
    os.makedirs(out_dir, exist_ok=True)
    figdir = os.path.join(out_dir, "figures")
    os.makedirs(figdir, exist_ok=True)
    return figdir


def run_demo(text: str, out_dir: str = None, show_tree: bool = False, figures: bool = False) -> dict:
    # 1) Histograma -> árbol -> tabla de códigos
    tree, code, counts = build_code(text)
    if show_tree:
        print(format_tree(tree))

    # 2) Codificar y decodificar
    bits = encode(code, text)
    decoded = decode_text(tree, bits)

    # 3) Métricas
    lavg = average_length(code, counts)
    h = source_entropy(counts)
    rows = [metrics_row("Huffman", code, counts, bits)]

    # 4) Salidas en disco (opcional)
    if out_dir:
        figdir = ensure_dirs(out_dir)
        df = save_code_table_csv(out_dir, code, counts)
        save_metrics_csv(out_dir, rows)
        if figures:
            plot_hist_bits(bits, "Bits del flujo Huffman", os.path.join(figdir, "bits_hist_huffman.png"))
            plot_code_lengths(df, "Longitud de código por símbolo", os.path.join(figdir, "code_lengths.png"))
        write_markdown(out_dir, text, df, lavg, h, figures=figures)

    return {
        "tree": tree,
        "code": code,
        "counts": counts,
        "bits": bits,
        "decoded": decoded,
        "lavg": lavg,
        "entropy": h,
        "metrics": rows,
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="Código de Huffman: construcción, codificación y decodificación")
    ap.add_argument("text", nargs="?", default=DEFAULT_TEXT, help="Texto a codificar")
    ap.add_argument("--file", help="Leer el texto desde un archivo (UTF-8)")
    ap.add_argument("--out", default="outputs", help="Directorio de salida")
    ap.add_argument("--show-tree", action="store_true", help="Imprimir el árbol de Huffman")
    ap.add_argument("--no-report", action="store_true", help="No escribir CSV ni informe")
    ap.add_argument("--figures", action="store_true", help="Guardar histogramas (matplotlib)")
    args = ap.parse_args(argv)

    text = args.text
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()

    try:
        res = run_demo(
            text,
            out_dir=None if args.no_report else args.out,
            show_tree=args.show_tree,
            figures=args.figures,
        )
    except HuffmanError as e:
        ap.exit(1, f"error: {e}\n")

    print(code_table_frame(res["code"], res["counts"]).to_string(index=False))
    print(f"code: {res['bits']}")
    print(f"text: {res['decoded']}")
    print(f"ok: {res['decoded'] == text}")
    print(f"Longitud media: {res['lavg']:.4f} bits/símbolo (entropía {res['entropy']:.4f})")
    if not args.no_report:
        print(f"Listo. Salidas en: {args.out}")


if __name__ == "__main__":
    main()
