"""
Offset-indexed binary/ASCII dump of a byte range.

Each byte is shown as eight binary digits (most significant bit first), not as
hex pairs; the `hexdump` command keeps this layout.
"""

NO_DATA_MESSAGE = "No data to display (file empty or offset beyond file size)"

_FILLER = " " * 9


def _display_char(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def format_dump(buffer: bytes, base_offset: int = 0, bytes_per_line: int = 8) -> str:
    """
    Render `buffer` as dump lines.

    Args:
        buffer: Bytes to render
        base_offset: Offset of buffer[0] within the file, used for the address column
        bytes_per_line: Number of byte slots per line

    Returns:
        The dump text, or NO_DATA_MESSAGE for an empty buffer

    Raises:
        ValueError: If bytes_per_line is not positive
    """
    if bytes_per_line < 1:
        raise ValueError("bytes_per_line must be positive")
    if not buffer:
        return NO_DATA_MESSAGE

    lines: list[str] = []
    for line_offset in range(0, len(buffer), bytes_per_line):
        chunk = buffer[line_offset : line_offset + bytes_per_line]
        cells: list[str] = []
        ascii_part: list[str] = []
        for slot in range(bytes_per_line):
            if slot < len(chunk):
                cells.append(f"{chunk[slot]:08b} ")
                ascii_part.append(_display_char(chunk[slot]))
            else:
                cells.append(_FILLER)
                ascii_part.append(" ")
        address = f"{base_offset + line_offset:08x}: "
        lines.append(address + "".join(cells) + " " + "".join(ascii_part) + "\n")
    return "".join(lines)
