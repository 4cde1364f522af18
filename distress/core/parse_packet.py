"""Packet Parser — recursive descent over the nested-list grammar.

Grammar:
    list   := '[' (item (',' item)*)? ']'
    item   := number | list
    number := one or more decimal digits

Invariants:
    - parse_packet_prefix consumes exactly one bracketed list and returns the remainder
    - parse_packet rejects trailing input (surrounding whitespace is ignored)
    - parse_packets skips blank lines and preserves the order of the rest
    - Every failure is a MalformedPacketError with a 1-based column
      (and line number when parsing a corpus)

Design Decisions:
    - Hand-written descent over a regex/eval shortcut: exact error positions,
      no code execution on untrusted text
    - ASCII digits only: str.isdigit() would accept superscripts and other scripts
"""

from distress.core.errors import MalformedPacketError
from distress.core.packet import Element, Packet

_DIGITS = frozenset("0123456789")


class _PacketParser:
    """Cursor over one line of text. Columns reported 1-based."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def fail(self, reason: str):
        raise MalformedPacketError(reason, column=self.pos + 1)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def found(self) -> str:
        char = self.peek()
        return repr(char) if char else "end of input"

    def parse_list(self) -> Packet:
        if self.peek() != "[":
            self.fail(f"expected '[', found {self.found()}")
        self.pos += 1
        if self.peek() == "]":
            self.pos += 1
            return ()

        items: list[Element] = []
        while True:
            items.append(self.parse_item())
            char = self.peek()
            if char == ",":
                self.pos += 1
            elif char == "]":
                self.pos += 1
                return tuple(items)
            else:
                self.fail(f"expected ',' or ']', found {self.found()}")

    def parse_item(self) -> Element:
        char = self.peek()
        if char == "[":
            return self.parse_list()
        if char in _DIGITS:
            return self.parse_number()
        self.fail(f"expected a number or '[', found {self.found()}")

    def parse_number(self) -> int:
        start = self.pos
        while self.peek() in _DIGITS:
            self.pos += 1
        try:
            return int(self.text[start:self.pos])
        except ValueError:
            # interpreter cap on int() digit count (sys.get_int_max_str_digits)
            self.pos = start
            self.fail("number too long")


def _run(parser: _PacketParser) -> Packet:
    try:
        return parser.parse_list()
    except RecursionError:
        raise MalformedPacketError(
            "nesting too deep", column=parser.pos + 1,
        ) from None


def parse_packet_prefix(text: str) -> tuple[Packet, str]:
    """Parse one list at the start of text. Returns (packet, unconsumed remainder)."""
    parser = _PacketParser(text)
    packet = _run(parser)
    return packet, text[parser.pos:]


def parse_packet(line: str) -> Packet:
    """Parse a whole line as exactly one packet."""
    end = len(line.rstrip())
    start = end - len(line[:end].lstrip())
    parser = _PacketParser(line[:end], start)
    packet = _run(parser)
    if parser.pos != end:
        parser.fail(f"unexpected trailing input {parser.found()}")
    return packet


def parse_packets(text: str) -> list[Packet]:
    """Parse a corpus: one packet per non-blank line, in input order."""
    packets: list[Packet] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            packets.append(parse_packet(line))
        except MalformedPacketError as exc:
            raise exc.at_line(line_number) from exc
    return packets
