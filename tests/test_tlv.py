import copy

import pytest

from tlvtree.hexdump import hexdump
from tlvtree.tlv import Tlv, set_tag_parser, tag_is_primitive


@pytest.fixture
def named_tags():
    set_tag_parser(lambda tag: f"T{tag:X}")
    yield
    set_tag_parser(None)


def test_tag_out_of_range_rejected():
    with pytest.raises(ValueError):
        Tlv(0x1_0000_0000)
    with pytest.raises(ValueError):
        tag_is_primitive(-1)


def test_int_value_rejected():
    with pytest.raises(TypeError):
        Tlv(0x84, 5)


def test_length_follows_value():
    record = Tlv(0x84, b"1PAY.SYS.DDF01")
    assert record.length == len(b"1PAY.SYS.DDF01")
    assert Tlv(0x84).length == 0


def test_from_string_appends_nul():
    record = Tlv.from_string(0x50, "VISA")
    assert record.value == b"VISA\x00"
    assert record.length == len("VISA") + 1


def test_equality_with_tag_and_record():
    record = Tlv(0x9F26, b"\x01\x02")
    assert record == 0x9F26
    assert not record == 0x9F27
    assert record == Tlv(0x9F26, b"\x01\x02")
    assert not record == Tlv(0x9F26, b"\x01")


def test_copy_is_equal_and_independent():
    record = Tlv(0x84, b"abc")
    clone = copy.copy(record)
    assert clone == record
    clone.tag = 0x85
    assert record.tag == 0x84


def test_format_without_value():
    assert str(Tlv(0x84)) == "* tag: 0x84\n"


def test_small_tag_is_zero_padded():
    assert "0x05" in str(Tlv(5))


def test_format_with_value_contains_hexdump():
    value = b"\x01\x02\x03"
    header, body = Tlv(0x9F02, value).format().split("\n", 1)
    assert f"length: {len(value)}" in header
    assert header.endswith("value:")
    assert body == hexdump(value, 4)


def test_format_indentation_shifts_everything():
    value = b"hello"
    header, body = Tlv(0x84, value).format(3).split("\n", 1)
    assert header.startswith("   * tag")
    assert body == hexdump(value, 7)


def test_tag_parser_used_for_names(named_tags):
    assert str(Tlv(0x84)) == "* tag: T84\n"


def test_tag_parser_reset_restores_hex(named_tags):
    set_tag_parser(None)
    assert "0x84" in str(Tlv(0x84))