# tlvtree

Decode and encode BER-TLV data (the tag-length-value layout used by EMV
and ASN.1 BER) as a tree of nodes.

A tag whose leading byte has the constructed bit (0x20) set holds child
nodes; any other non-zero tag is primitive and holds raw bytes.

## Installing

```
pip install .
```

## Decoding and encoding

```python
from tlvtree.tlv_tree import TlvTreeNode, TlvError

data = bytes.fromhex("6F1A840E315041592E5359532E4444463031A5088801025F2D02656E")

tree = TlvTreeNode.deserialize(data)
print(tree.data.tag)                 # 111 (0x6F)
for child in tree.children:
    print(hex(child.data.tag), child.data.value)

assert tree.serialize() == data
```

`serialize()` returns `bytes`. Malformed input given to `deserialize`
raises `TlvError` (a subclass of `ValueError`): a truncated tag, length or
value, a zero tag byte, an indefinite length, or a tag or length field
longer than 4 bytes. Encoding a node whose tag is zero below the top level,
or a length that needs more than 4 bytes, raises `TlvError` as well.

The functions `serialize(node)` and `deserialize(data)` in
`tlvtree.tlv_tree` do the same work as the methods.

When the input holds exactly one top-level element, that element's node is
returned. Otherwise (none or several) the result is a root node with tag 0
whose children are the top-level elements. When a root with tag 0 is
serialized, only its children are written, so empty input round-trips to
`b""`.

## Building a tree

```python
from tlvtree.tlv_tree import TlvTreeNode

root = TlvTreeNode(0x6F)
fci = root.add_tlv(0xA5)
fci.add_tlv(0x88, b"\x02")
fci.add_tlv(0x5F2D, b"en")

print(root.serialize().hex().upper())   # 6F0AA5088801025F2D02656E
```

Lengths of constructed nodes are computed from their children when
encoding; the value bytes of a constructed node are not written.

## Records

`tlvtree.tlv.Tlv(tag, value)` holds a 32-bit tag and its value bytes, with
a `length` property. `Tlv.from_string(tag, text)` stores the text as UTF-8
followed by a NUL byte. A `Tlv` compares equal to another `Tlv` with the
same tag and value, and to an `int` equal to its tag.
`tlvtree.tlv.tag_is_primitive(tag)` tells whether a tag is primitive; a
zero tag gives `False`.

## Searching and printing

`TreeNode.find(value, index=0)` searches breadth-first through the whole
subtree, starting with the node itself. `TreeNode.find_immediate(value,
index=0)` looks only at direct children. Both compare a node's data with
`value`, so a tag number matches a `Tlv` with that tag. `index` picks the
n-th match. Either one returns `None` when nothing matches.

```python
node = root.find(0x5F2D)
print(node.data.value)   # b'en'

print(root.dump(), end="")
```

`dump(indentation=0)` returns text with one entry per node: its tag, and
for a non-empty value its length and a hex dump, each level indented two
more spaces. `tlvtree.tlv.set_tag_parser(parser)` installs a function that
turns a tag number into the text shown in place of the hex tag; pass
`None` to go back to hex. `tlvtree.hexdump.hexdump(data, indentation=1)`
returns the hex and ASCII dump on its own.

Other tree operations on `TreeNode`: `parent`, `root`, `depth`,
`children`, `add_child(data)`, `graft(node)` (appends a deep copy),
`prune(node)` (detaches a direct child), `is_child_of`, `is_parent_of` and
`copy()`.

## Limits

Tags and length fields are limited to 4 bytes each. Indefinite lengths are
not supported. The package works on in-memory byte strings only; it has no
command-line tool and does no streaming input or output.

## Running the tests

```
pip install .[test]
pytest
```