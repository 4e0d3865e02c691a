"""Huffman trees, code tables and prefix-code decoding."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import count


@dataclass
class HuffmanNode:
    """A Huffman tree node: a leaf holds a symbol, an inner node two children."""

    weight: float
    symbol: str | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None


def build_huffman_tree(symbols: Sequence[str], weights: Sequence[float]) -> HuffmanNode:
    """Build a Huffman tree, joining the two lightest nodes at each step.

    The lighter node becomes the left child; ties go to the node created first.
    """
    if len(symbols) != len(weights):
        raise ValueError("symbols and weights differ in length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    if len(set(symbols)) != len(symbols):
        raise ValueError("symbols must be distinct")
    order = count()
    heap = [
        (weight, next(order), HuffmanNode(weight, symbol))
        for symbol, weight in zip(symbols, weights)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        w1, _, first = heapq.heappop(heap)
        w2, _, second = heapq.heappop(heap)
        parent = HuffmanNode(w1 + w2, left=first, right=second)
        heapq.heappush(heap, (parent.weight, next(order), parent))
    return heap[0][2]


def huffman_codes(symbols: Sequence[str], weights: Sequence[float]) -> dict[str, str]:
    """Return each symbol's code: ``0`` for a left branch, ``1`` for a right one."""
    codes: dict[str, str] = {}
    stack = [(build_huffman_tree(symbols, weights), "")]
    while stack:
        node, code = stack.pop()
        if node.symbol is not None:
            codes[node.symbol] = code
            continue
        if node.left is not None:
            stack.append((node.left, code + "0"))
        if node.right is not None:
            stack.append((node.right, code + "1"))
    return {symbol: codes[symbol] for symbol in symbols}


def parse_code_table(lines: Iterable[str]) -> dict[str, str]:
    """Read lines of the form ``<symbol>:<code>``, skipping blank lines."""
    table: dict[str, str] = {}
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        if len(line) < 2 or line[1] != ":":
            raise ValueError(f"bad code table line {line!r}")
        table[line[0]] = line[2:]
    return table


def decode(bits: str, codes: dict[str, str]) -> str:
    """Decode ``bits`` by emitting a symbol whenever the bits read so far form its code.

    Bits left over at the end that form no complete code are ignored.
    """
    by_code: dict[str, str] = {}
    for symbol, code in sorted(codes.items()):
        by_code.setdefault(code, symbol)
    decoded: list[str] = []
    current = ""
    for bit in bits:
        current += bit
        if current in by_code:
            decoded.append(by_code[current])
            current = ""
    return "".join(decoded)