"""
ganzhi.engines.cycle
--------------------
The sexagenary cycle: 10 stems, 12 branches and the 60 pairs they generate.

Combination k (0..59) is (STEMS[k % 10], BRANCHES[k % 12]); only these 60 of
the 120 stem/branch pairs exist. Indices are always reduced mod 60.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

STEMS: Tuple[str, ...] = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
BRANCHES: Tuple[str, ...] = ("子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥")
ANIMALS: Tuple[str, ...] = ("鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪")
ELEMENTS: Tuple[str, ...] = ("木", "火", "土", "金", "水")

# Stems pair off by element: 甲乙 wood, 丙丁 fire, ...
STEM_ELEMENT: Dict[str, str] = {s: ELEMENTS[i // 2] for i, s in enumerate(STEMS)}

BRANCH_ELEMENT: Dict[str, str] = {
    "寅": "木", "卯": "木",
    "巳": "火", "午": "火",
    "辰": "土", "戌": "土", "丑": "土", "未": "土",
    "申": "金", "酉": "金",
    "亥": "水", "子": "水",
}

CYCLE: Tuple[str, ...] = tuple(STEMS[k % 10] + BRANCHES[k % 12] for k in range(60))
_CYCLE_INDEX: Dict[str, int] = {name: k for k, name in enumerate(CYCLE)}


@dataclass(frozen=True)
class GanZhi:
    """A position in the 60-cycle."""
    index: int

    def __post_init__(self) -> None:
        if not (0 <= self.index < 60):
            raise ValueError("sexagenary index must be in 0..59; use sexagenary() to wrap")

    @property
    def stem_index(self) -> int:
        return self.index % 10

    @property
    def branch_index(self) -> int:
        return self.index % 12

    @property
    def stem(self) -> str:
        return STEMS[self.stem_index]

    @property
    def branch(self) -> str:
        return BRANCHES[self.branch_index]

    @property
    def elements(self) -> Tuple[str, str]:
        return (STEM_ELEMENT[self.stem], BRANCH_ELEMENT[self.branch])

    def __str__(self) -> str:
        return CYCLE[self.index]


def sexagenary(n: int) -> GanZhi:
    """The term at position n mod 60; negative offsets wrap forward."""
    # Python's % already floors toward -inf, so -1 -> 59.
    return GanZhi(n % 60)


def from_parts(stem_index: int, branch_index: int) -> GanZhi:
    """
    Recover the cycle position from a (stem, branch) index pair.

    Solves k = s (mod 10), k = b (mod 12); a solution exists only when s and b
    have the same parity.
    """
    s, b = stem_index % 10, branch_index % 12
    if (s - b) % 2:
        raise ValueError(f"{STEMS[s]}{BRANCHES[b]} is not a sexagenary combination")
    # k = s + 10 t with 10 t = b - s (mod 12)  ->  5 t = (b - s)/2 (mod 6), 5^-1 = 5 (mod 6)
    t = (5 * ((b - s) // 2)) % 6
    return GanZhi(s + 10 * t)


def parse(name: str) -> GanZhi:
    """'甲子' -> GanZhi(0). Raises ValueError for anything outside the 60 pairs."""
    if name not in _CYCLE_INDEX:
        raise ValueError(f"'{name}' is not a sexagenary combination")
    return GanZhi(_CYCLE_INDEX[name])


def element_of(char: str) -> str:
    """Element (木/火/土/金/水) of a single stem or branch character."""
    if char in STEM_ELEMENT:
        return STEM_ELEMENT[char]
    if char in BRANCH_ELEMENT:
        return BRANCH_ELEMENT[char]
    raise KeyError(f"'{char}' is neither a stem nor a branch")
