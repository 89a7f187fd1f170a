"""BER-TLV decoding and encoding into trees of tag-length-value nodes, with hex dumps."""

__version__ = "0.1.0"
__all__ = ["hexdump", "tlv", "tree", "tlv_tree"]