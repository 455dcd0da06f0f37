"""Código de Huffman: histograma, árbol, tabla de códigos, codificación y decodificación.

D.A. Huffman, "A Method for the Construction of Minimum-Redundancy Codes",
Proceedings of the I.R.E., septiembre 1952, pp. 1098-1102.

Las cadenas de bits son `str` sobre los caracteres '0' y '1'.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from heapq import heapify, heappush, heappop
from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Tuple, Union


class HuffmanError(Exception):
    """Error base del módulo."""


class EmptyInputError(HuffmanError, ValueError):
    """Se pidió construir un árbol sin hojas."""


class UnknownSymbolError(HuffmanError, LookupError):
    """El símbolo no tiene entrada en la tabla de códigos."""

    def __init__(self, symbol):
        super().__init__(f"símbolo desconocido: {symbol!r}")
        self.symbol = symbol


class MalformedBitStringError(HuffmanError, ValueError):
    """La cadena de bits no es una concatenación exacta de códigos completos."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


@dataclass(frozen=True)
class HuffNode:
    freq: int
    sym: Any = None
    left: Optional["HuffNode"] = None
    right: Optional["HuffNode"] = None

    @property
    def is_leaf(self) -> bool:
        # Una hoja no tiene hijos; el símbolo puede ser None, 0 o ''
        return self.left is None and self.right is None


WeightedLeaves = Union[Mapping[Hashable, int], Iterable[Tuple[Hashable, int]]]


def build_histogram(symbols: Iterable[Hashable]) -> Counter:
    """Cuenta las ocurrencias de cada símbolo (en orden de primera aparición)."""
    return Counter(symbols)


def build_tree(weighted_leaves: WeightedLeaves) -> HuffNode:
    """
    Construye el árbol de Huffman fusionando repetidamente los dos nodos de menor peso.

    `weighted_leaves` es un dict {simbolo: frecuencia} o una secuencia de pares
    (simbolo, frecuencia). Los empates se resuelven por orden de inserción:
    cada nodo recibe un número de secuencia y el heap nunca compara nodos.

    Devuelve la raíz del árbol. Lanza EmptyInputError si no hay hojas.
    """
    items = weighted_leaves.items() if isinstance(weighted_leaves, Mapping) else weighted_leaves

    heap = []
    seq = 0
    seen = set()
    for s, f in items:
        if f < 0:
            raise ValueError(f"frecuencia negativa para {s!r}: {f}")
        if s in seen:
            # cada símbolo debe estar en exactamente una hoja
            raise ValueError(f"símbolo repetido: {s!r}")
        seen.add(s)
        heap.append((f, seq, HuffNode(f, sym=s)))
        seq += 1

    if not heap:
        raise EmptyInputError("no se puede construir un árbol de Huffman sin símbolos")

    heapify(heap)
    while len(heap) > 1:
        wa, _, a = heappop(heap)
        wb, _, b = heappop(heap)
        heappush(heap, (wa + wb, seq, HuffNode(wa + wb, left=a, right=b)))
        seq += 1

    return heap[0][2]


def build_code_table(tree: HuffNode) -> Dict[Hashable, str]:
    """
    Recorre el árbol en profundidad: '0' hacia la izquierda, '1' hacia la derecha.

    Caso degenerado (un único símbolo): la raíz es hoja y su código es '0'.
    """
    if tree.is_leaf:
        return {tree.sym: '0'}

    code = {}
    stack = [(tree, '')]
    while stack:
        n, prefix = stack.pop()
        if n.is_leaf:
            code[n.sym] = prefix
            continue
        # derecha primero para visitar la izquierda antes
        stack.append((n.right, prefix + '1'))
        stack.append((n.left, prefix + '0'))
    return code


def encode(table: Mapping[Hashable, str], symbols: Iterable[Hashable]) -> str:
    """Concatena los códigos de `symbols` en orden. Lanza UnknownSymbolError."""
    out = []
    for s in symbols:
        try:
            out.append(table[s])
        except KeyError:
            raise UnknownSymbolError(s) from None
    return ''.join(out)


def _bit(b, position: int) -> str:
    # solo '0'/'1' o enteros exactos 0/1 (no bool ni float)
    if isinstance(b, str) or type(b) is int:
        if b == '0' or b == 0:
            return '0'
        if b == '1' or b == 1:
            return '1'
    raise MalformedBitStringError(f"bit inválido {b!r} en la posición {position}", position)


def decode(tree: HuffNode, bits: Iterable) -> List[Hashable]:
    """
    Decodifica `bits` recorriendo el árbol bit a bit desde la raíz.

    Cada vez que el cursor llega a una hoja se emite su símbolo y se vuelve a la
    raíz. Al agotarse la entrada el cursor debe estar en la raíz; si no, la
    cadena estaba truncada. Acepta '0'/'1' o enteros 0/1.
    """
    out = []
    if tree.is_leaf:
        # un solo símbolo: cada '0' es una ocurrencia
        for i, b in enumerate(bits):
            if _bit(b, i) != '0':
                raise MalformedBitStringError(
                    f"bit '1' en la posición {i} con un alfabeto de un solo símbolo", i)
            out.append(tree.sym)
        return out

    node = tree
    i = -1
    for i, b in enumerate(bits):
        node = node.left if _bit(b, i) == '0' else node.right
        if node.is_leaf:
            out.append(node.sym)
            node = tree

    if node is not tree:
        raise MalformedBitStringError(
            f"cadena de bits truncada: termina a mitad de un código (tras {i + 1} bits)", i + 1)
    return out


def decode_text(tree: HuffNode, bits: Iterable) -> str:
    return ''.join(decode(tree, bits))


def build_code(symbols: Iterable[Hashable]) -> Tuple[HuffNode, Dict[Hashable, str], Counter]:
    """
    Construye el código de Huffman para una secuencia de símbolos.
    Devuelve:
      - tree: raíz del árbol de Huffman
      - code: dict {simbolo: 'cadena_de_bits'}
      - counts: Counter con frecuencias de cada símbolo
    """
    counts = build_histogram(symbols)
    tree = build_tree(counts)
    return tree, build_code_table(tree), counts


def code_lengths(table: Mapping[Hashable, str]) -> Dict[Hashable, int]:
    return {s: len(c) for s, c in table.items()}


def weighted_path_length(tree: HuffNode) -> int:
    """Suma de peso(hoja) * profundidad(hoja). Una hoja sola tiene profundidad 0."""
    total = 0
    stack = [(tree, 0)]
    while stack:
        n, depth = stack.pop()
        if n.is_leaf:
            total += n.freq * depth
        else:
            stack.append((n.left, depth + 1))
            stack.append((n.right, depth + 1))
    return total


def average_length(table: Mapping[Hashable, str], counts: Mapping[Hashable, int]) -> float:
    """Longitud media de código (bits/símbolo)."""
    total = sum(counts.values())
    if total == 0:
        return 0.0
    return sum(len(table[s]) * counts[s] for s in counts) / total


def format_tree(tree: HuffNode) -> str:
    """
    Representación del árbol entre paréntesis, solo para diagnóstico:
    hojas como (sym:peso) y nodos internos como (*:peso izq der).
    """
    parts = []
    # pila de nodos pendientes; None marca el cierre de un nodo interno
    stack = [tree]
    while stack:
        n = stack.pop()
        if n is None:
            parts.append(')')
            continue
        if parts:
            parts.append(' ')
        if n.is_leaf:
            parts.append(f"({n.sym!r}:{n.freq})")
        else:
            parts.append(f"(*:{n.freq}")
            stack.extend([None, n.right, n.left])
    return ''.join(parts)
