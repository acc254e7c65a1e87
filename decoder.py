# decoder.py

"""
Decode an archived bitstring against its code tree and compute the
compression statistics reported for it
"""

from dataclasses import dataclass

from errors import (
    EmptyInput,
    IncompleteCode,
    InvalidBitCharacter,
    InvalidBitSequence,
    NoCharactersDecoded,
)
from msgtree import MsgNode

UNCOMPRESSED_BITS_PER_CHAR = 16 # baseline: one UTF-16 code unit per character


@dataclass
class DecodeResult:
    text: str
    total_bits: int
    total_characters: int
    dangling_bits: int = 0 # trailing bits that ended mid-code and were dropped

    @property
    def uncompressed_bits(self) -> int:
        return self.total_characters * UNCOMPRESSED_BITS_PER_CHAR

    @property
    def avg_bits_per_char(self) -> float:
        return self.total_bits / self.total_characters

    @property
    def space_saving_pct(self) -> float:
        return (1 - self.total_bits / self.uncompressed_bits) * 100


def validate_bits(bits: str) -> None:
    if not bits:
        raise EmptyInput("Encoded message")
    for pos, ch in enumerate(bits):
        if ch != '0' and ch != '1':
            raise InvalidBitCharacter(pos, ch)


def decode(root: MsgNode, bits: str, strict: bool = False) -> DecodeResult:
    """
    Walk the tree once per bit: '0' goes left, '1' goes right. Reaching a
    leaf emits its character and restarts at the root.

    A message that stops in the middle of a code keeps what was decoded so
    far and reports the leftover bits in dangling_bits; with strict=True it
    raises IncompleteCode instead.
    """
    validate_bits(bits)

    decoded = []
    node = root
    code_start = 0 # bit index where the code being walked began

    for bit_index, bit in enumerate(bits):
        node = node.left if bit == '0' else node.right
        if node is None:
            raise InvalidBitSequence(bit_index)

        # Leaf
        if node.is_leaf():
            decoded.append(node.payload)
            node = root
            code_start = bit_index + 1

    dangling = len(bits) - code_start
    if dangling and strict:
        raise IncompleteCode(code_start)

    if not decoded:
        raise NoCharactersDecoded()

    text = "".join(decoded)
    return DecodeResult(
        text=text,
        total_bits=len(bits),
        total_characters=len(text),
        dangling_bits=dangling,
    )
