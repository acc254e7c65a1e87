# archive.py

"""
Reads .arch files: the tree description followed by the encoded message on
the last line

The description can span several lines because '\\n' is itself a valid leaf
character, so the split happens at the last newline only.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from errors import ArchiveEncodingError, MissingSeparator


@dataclass
class ArchiveSections:
    tree_description: str
    encoded_bits: str


def split_archive(content: str) -> ArchiveSections:
    content = content.strip()
    pos = content.rfind('\n')
    if pos == -1:
        raise MissingSeparator()

    # spaces and newlines inside the description are payloads, keep them
    description = content[:pos]
    if description.endswith('\r'):
        description = description[:-1]
    bits = content[pos + 1:].strip()

    return ArchiveSections(tree_description=description, encoded_bits=bits)


def read_archive(path: Union[str, Path]) -> ArchiveSections:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ArchiveEncodingError(str(path), str(e)) from e
    return split_archive(content)
