"""
Fixed-width NAPPI record parsing.

Each line of the NAPPI file holds one product. Fields live at fixed byte
offsets and are padded with spaces; everything outside the four fields
used here is ignored.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Union

from .errors import MalformedRecordError

# (start, end) byte offsets, end exclusive
CODE_SLICE = slice(11, 20)
NAME_SLICE = slice(20, 58)
STRENGTH_SLICE = slice(59, 75)
FORM_SLICE = slice(75, 79)

MIN_LINE_LENGTH = FORM_SLICE.stop

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Record:
    """One product from the NAPPI catalog."""
    code: str
    name: str
    strength: str
    form: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _field(line: bytes, span: slice, encoding: str) -> str:
    return line[span].decode(encoding, errors="replace").strip()


def parse_fixed_width_line(
    line: Union[bytes, str],
    line_no: Optional[int] = None,
    encoding: str = DEFAULT_ENCODING,
) -> Record:
    """
    Parse one line of the NAPPI file into a Record.

    Offsets are byte offsets, so a str line is encoded before slicing.
    A trailing line terminator is removed before the length check.

    Args:
        line: The raw line.
        line_no: 1-based line number, used only in error messages.
        encoding: Encoding of the file.

    Raises:
        MalformedRecordError: If the line is shorter than MIN_LINE_LENGTH bytes.
    """
    if isinstance(line, str):
        line = line.encode(encoding)
    line = line.rstrip(b"\r\n")

    if len(line) < MIN_LINE_LENGTH:
        raise MalformedRecordError(line_no, len(line), MIN_LINE_LENGTH)

    return Record(
        code=_field(line, CODE_SLICE, encoding),
        name=_field(line, NAME_SLICE, encoding),
        strength=_field(line, STRENGTH_SLICE, encoding),
        form=_field(line, FORM_SLICE, encoding),
    )
