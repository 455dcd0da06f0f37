import numpy as np
import matplotlib.pyplot as plt

from .bits_utils import bits_entropy_stats

def plot_hist_bits(bits: str, title, fname):
    """
    Proporción de 0 y 1 en el flujo codificado frente al ideal 0.5.
    Un código de Huffman cercano a la entropía deja P(0) ≈ P(1).
    """
    p0, p1, hb, _ = bits_entropy_stats(bits)
    plt.figure()
    plt.bar([0, 1], [p0, p1])
    plt.axhline(0.5, linestyle='--')
    plt.xticks([0, 1], ['0', '1'])
    plt.ylim(0, 1)
    plt.xlabel(f'Bit ({len(bits)} bits, H = {hb:.3f} bits/bit)')
    plt.ylabel('Proporción')
    plt.title(title)
    plt.tight_layout()
    plt.savefig(fname, dpi=140)
    plt.close()

def plot_code_lengths(df, title, fname):
    """Longitud de código por símbolo (una figura, sin estilos de color explícitos)."""
    plt.figure()
    plt.bar(np.arange(len(df)), df["Longitud"])
    plt.xticks(np.arange(len(df)), df["Símbolo"], rotation=90)
    plt.xlabel('Símbolo')
    plt.ylabel('Longitud [bits]')
    plt.title(title)
    plt.tight_layout()
    plt.savefig(fname, dpi=140)
    plt.close()
