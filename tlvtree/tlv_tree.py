"""BER-TLV encoding and decoding of trees of tag-length-value records."""

from tlvtree.tlv import Tlv, tag_is_primitive
from tlvtree.tree import TreeNode

_MAX_FIELD_BYTES = 4
_SHORT_LENGTH_LIMIT = 0x7F
_LONG_LENGTH_FLAG = 0x80
_MULTI_BYTE_TAG = 0x1F
_MORE_TAG_BYTES = 0x80


class TlvError(ValueError):
    """Raised when a tree cannot be encoded or a buffer cannot be decoded."""


def _byte_count(number):
    return max(1, (number.bit_length() + 7) // 8)


def _encode_tag(tag):
    if not tag:
        raise TlvError("cannot encode a record with a zero tag")
    return tag.to_bytes(_byte_count(tag), "big")


def _encode_length(length):
    if length < _SHORT_LENGTH_LIMIT:
        return bytes([length])
    size = _byte_count(length)
    if size > _MAX_FIELD_BYTES:
        raise TlvError(f"length {length} does not fit in {_MAX_FIELD_BYTES} bytes")
    return bytes([_LONG_LENGTH_FLAG | size]) + length.to_bytes(size, "big")


def _encode_node(node):
    record = node.data
    tag = _encode_tag(record.tag)
    if tag_is_primitive(record.tag):
        content = record.value
    else:
        content = b"".join(_encode_node(child) for child in node.children)
    return tag + _encode_length(len(content)) + content


def _read_tag(data, pos, end):
    if pos >= end:
        raise TlvError(f"missing tag at offset {pos}")
    tag = data[pos]
    if not tag:
        raise TlvError(f"zero tag byte at offset {pos}")
    pos += 1
    if tag & _MULTI_BYTE_TAG != _MULTI_BYTE_TAG:
        return tag, pos
    consumed = 1
    while True:
        if pos >= end or consumed >= _MAX_FIELD_BYTES:
            raise TlvError(f"truncated or oversized tag ending at offset {pos}")
        tag = tag << 8 | data[pos]
        pos += 1
        consumed += 1
        if not tag & _MORE_TAG_BYTES:
            return tag, pos


def _read_length(data, pos, end):
    if pos >= end:
        raise TlvError(f"missing length at offset {pos}")
    first = data[pos]
    pos += 1
    if not first & _LONG_LENGTH_FLAG:
        return first, pos
    size = first & ~_LONG_LENGTH_FLAG & 0xFF
    if not size:
        raise TlvError(f"indefinite length at offset {pos - 1} is not supported")
    if size > _MAX_FIELD_BYTES or pos + size > end:
        raise TlvError(f"truncated or oversized length at offset {pos - 1}")
    return int.from_bytes(data[pos:pos + size], "big"), pos + size


def _decode_into(node, data, pos, end):
    while pos < end:
        tag, pos = _read_tag(data, pos, end)
        length, pos = _read_length(data, pos, end)
        if length > end - pos:
            raise TlvError(
                f"value of tag 0x{tag:02x} needs {length} bytes, {end - pos} left"
            )
        stop = pos + length
        if tag_is_primitive(tag):
            node.add_tlv(tag, data[pos:stop])
        else:
            _decode_into(node.add_tlv(tag), data, pos, stop)
        pos = stop


class TlvTreeNode(TreeNode):
    """A tree node carrying a :class:`Tlv` record.

    Primitive tags hold their value bytes; constructed tags hold child nodes.
    A node with tag zero acts as a container for several top-level records.
    """

    def __init__(self, tag=0, value=b"", parent=None):
        super().__init__(Tlv(tag, value), parent)

    def add_tlv(self, tag, value=b""):
        """Append a child record with *tag* and *value* and return its node."""
        return self.add_child(Tlv(tag, value))

    def serialize(self):
        """Encode this node, or its children if its tag is zero, as BER-TLV bytes."""
        if self.data.tag:
            return _encode_node(self)
        return b"".join(_encode_node(child) for child in self.children)

    @classmethod
    def deserialize(cls, data):
        """Decode BER-TLV *data* into a tree.

        A single top-level record becomes the returned node itself; several
        are gathered under a node with tag zero.
        """
        data = bytes(data)
        root = cls()
        _decode_into(root, data, 0, len(data))
        if len(root.children) == 1:
            only = root.children[0]
            root.prune(only)
            return only
        return root


def serialize(node):
    """Encode *node* as BER-TLV bytes."""
    return node.serialize()


def deserialize(data):
    """Decode BER-TLV *data* into a :class:`TlvTreeNode`."""
    return TlvTreeNode.deserialize(data)