"""Single tag-length-value records and BER tag helpers."""

TAG_MAX = 0xFFFFFFFF

_settings = {"tag_parser": None}


def set_tag_parser(parser):
    """Install a callable mapping a tag to its display name, or None to show hex."""
    if parser is not None and not callable(parser):
        raise TypeError(f"tag parser must be callable or None, not {type(parser).__name__}")
    _settings["tag_parser"] = parser


def _check_tag(tag):
    if not isinstance(tag, int):
        raise TypeError(f"tag must be an int, not {type(tag).__name__}")
    if not 0 <= tag <= TAG_MAX:
        raise ValueError(f"tag {tag:#x} does not fit in 32 bits")
    return tag


def tag_is_primitive(tag):
    """Tell whether *tag* is primitive: the constructed bit of its leading byte is clear.

    A zero tag is neither primitive nor constructed and gives False.
    """
    for byte in _check_tag(tag).to_bytes(4, "big"):
        if byte:
            return not byte & 0x20
    return False


class Tlv:
    """A tag together with its raw value bytes."""

    __slots__ = ("tag", "value")

    def __init__(self, tag=0, value=b""):
        if isinstance(value, int):
            raise TypeError("value must be bytes-like, not int")
        self.tag = _check_tag(tag)
        self.value = bytes(value)

    @classmethod
    def from_string(cls, tag, string):
        """Build a record holding *string* encoded as UTF-8 with a trailing NUL."""
        return cls(tag, string.encode("utf-8") + b"\0")

    @property
    def length(self):
        """Number of value bytes."""
        return len(self.value)

    def format(self, indentation=0):
        """Render the record as text, indented by *indentation* spaces."""
        parser = _settings["tag_parser"]
        if parser is not None:
            tag_text = str(parser(self.tag))
        else:
            tag_text = f"0x{self.tag:02x}"
        header = f"{' ' * indentation}* tag: {tag_text}"
        if not self.value:
            return header + "\n"
        return (
            f"{header}, length: {self.length}, value:\n"
            + _hexdump(self.value, indentation + 4)
        )

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Tlv(tag=0x{self.tag:02x}, value={self.value!r})"

    def __eq__(self, other):
        if isinstance(other, Tlv):
            return self.tag == other.tag and self.value == other.value
        if isinstance(other, int):
            return self.tag == other
        return NotImplemented

    __hash__ = None

    def __copy__(self):
        return Tlv(self.tag, self.value)


from tlvtree.hexdump import hexdump as _hexdump  # noqa: E402