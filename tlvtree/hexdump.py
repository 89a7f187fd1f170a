"""Hex dump formatting of byte strings."""

_PRINTABLE = range(0x20, 0x7F)
_LINE = 16
_HALF = 8


def hexdump(data, indentation=1):
    """Return *data* as hex dump lines of 16 bytes followed by their ASCII form.

    Each line starts with *indentation* spaces. Bytes outside the printable
    ASCII range are shown as ``.`` in the ASCII column.
    """
    data = bytes(data)
    lines = []
    for start in range(0, len(data), _LINE):
        chunk = data[start:start + _LINE]
        cells = []
        for position, byte in enumerate(chunk, 1):
            cells.append(f"{byte:02X} ")
            if position % _HALF == 0 or position == len(chunk):
                cells.append(" ")
        if len(chunk) < _LINE:
            if len(chunk) <= _HALF:
                cells.append(" ")
            cells.append("   " * (_LINE - len(chunk)))
        ascii_text = "".join(chr(byte) if byte in _PRINTABLE else "." for byte in chunk)
        lines.append(f"{' ' * indentation}{''.join(cells)}|  {ascii_text}\n")
    return "".join(lines)