"""Packet Types — the nested-list value model and its canonical printer.

Invariants:
    - An Element is either a non-negative int or a tuple of Elements
    - A Packet is always a tuple (top-level list)
    - Values are immutable; equality is structural (tuple ==)
    - format_packet output is accepted by parse_packet and round-trips exactly

Design Decisions:
    - int | tuple over a tagged dataclass: native equality, hashing and immutability
      with zero wrapping cost
    - Printer emits no whitespace: one canonical text per value
"""

from typing import TypeAlias

Element: TypeAlias = "int | tuple[Element, ...]"
Packet: TypeAlias = "tuple[Element, ...]"


def is_number(element: Element) -> bool:
    """True for the Number variant (bool is not a packet value)."""
    return isinstance(element, int) and not isinstance(element, bool)


def format_packet(element: Element) -> str:
    """Render an element as compact nested-list text, e.g. '[1,[2,3]]'."""
    if is_number(element):
        return str(element)
    return "[" + ",".join(format_packet(item) for item in element) + "]"
