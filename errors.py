# errors.py

"""
Exceptions raised while rebuilding a code tree and decoding an archived message

Everything derives from ValueError so callers that only care about
"bad input" can catch that
"""

from typing import Optional


class MsgTreeError(ValueError):
    pass


class ParseError(MsgTreeError): # problems with the tree description
    pass


class DecodeError(MsgTreeError): # problems with the bitstring
    pass


class ArchiveError(MsgTreeError): # problems splitting the archive file
    pass


class PositionalError(MsgTreeError):
    """Error tied to an index in the tree description or the bitstring"""

    def __init__(self, position: int, message: Optional[str] = None):
        self.position = position
        super().__init__(message or f"{self.__class__.__name__} at position {position}")


class EmptyInput(ParseError, DecodeError):
    def __init__(self, what: str = "input"):
        self.what = what
        super().__init__(f"{what} is empty")


class TruncatedDescription(ParseError):
    def __init__(self, pending: int = 1):
        self.pending = pending # internal nodes still missing a child
        super().__init__(
            f"Tree description ended early: {pending} internal node(s) missing a child"
        )


class TrailingTokens(PositionalError, ParseError):
    def __init__(self, position: int):
        super().__init__(position, f"Unexpected tokens after a complete tree, starting at position {position}")


class InvalidBitCharacter(PositionalError, DecodeError):
    def __init__(self, position: int, char: str = ""):
        self.char = char
        super().__init__(position, f"Invalid bit character {char!r} at position {position}")


class InvalidBitSequence(PositionalError, DecodeError):
    def __init__(self, position: int):
        super().__init__(position, f"Invalid bit sequence in the encoded message at bit {position}")


class IncompleteCode(PositionalError, DecodeError):
    def __init__(self, position: int):
        super().__init__(position, f"Encoded message ends in the middle of a code starting at bit {position}")


class NoCharactersDecoded(DecodeError):
    def __init__(self):
        super().__init__("Encoded message decoded to zero characters")


class MissingSeparator(ArchiveError):
    def __init__(self):
        super().__init__("Invalid file format: Missing binary message.")


class ArchiveEncodingError(ArchiveError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Archive {path} is not valid UTF-8 text: {reason}")
