import numpy as np
import math
from typing import List, Mapping, Tuple

def bits_to_list(bits: str) -> List[int]:
    """'0110' -> [0, 1, 1, 0]. Lanza ValueError con cualquier otro carácter."""
    out = []
    for i, b in enumerate(bits):
        if b not in ('0', '1'):
            raise ValueError(f"bit inválido {b!r} en la posición {i}")
        out.append(1 if b == '1' else 0)
    return out

def list_to_bits(bits: List[int]) -> str:
    return ''.join('1' if int(b) else '0' for b in bits)

def _hb(p: float) -> float:
    if p <= 0 or p >= 1:
        return 0.0
    return -p * math.log2(p) - (1 - p) * math.log2(1 - p)

def bits_entropy_stats(bits) -> Tuple[float, float, float, float]:
    """
    Calcula métricas del flujo de bits (str '0'/'1' o lista de 0/1):
    - p0: probabilidad de 0
    - p1: probabilidad de 1
    - H: entropía (bits/bit)
    - var: varianza sobre {0,1}
    Con un flujo vacío devuelve ceros.
    """
    if isinstance(bits, str):
        bits = bits_to_list(bits)
    arr = np.array(bits, dtype=np.uint8)
    if arr.size == 0:
        return 0.0, 0.0, 0.0, 0.0
    p1 = float(arr.mean())
    p0 = 1 - p1
    return p0, p1, _hb(p1), float(arr.var())

def source_entropy(counts: Mapping) -> float:
    """Entropía de la fuente H = -sum(p * log2 p) en bits/símbolo."""
    f = np.array(list(counts.values()), dtype=np.float64)
    f = f[f > 0]
    if f.size == 0:
        return 0.0
    p = f / f.sum()
    return float(-(p * np.log2(p)).sum())
