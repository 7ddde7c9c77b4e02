import pytest

from numcodec.serialization import Deserializer, Serializer, UnexpectedEndOfStream


def test_serializer_keeps_order() -> None:
    se = Serializer.build_bytes_serializer()
    assert se.cur_pos() == 0
    se.write_byte(0x01)
    se.write_bytes(b'\x02\x03')
    se.write_bytes(bytearray(b'\x04'))
    se.write_byte(0xff)
    assert se.cur_pos() == 5
    assert bytes(se.finalize()) == b'\x01\x02\x03\x04\xff'


def test_serializer_rejects_out_of_range_byte() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(ValueError):
        se.write_byte(256)
    with pytest.raises(ValueError):
        se.write_byte(-1)
    assert se.cur_pos() == 0


def test_serializer_cannot_be_reused() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_byte(0)
    se.finalize()
    with pytest.raises(AttributeError):
        se.write_byte(0)


def test_finalize_result_is_a_snapshot() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_bytes(b'abc')
    result = se.finalize()
    assert isinstance(result, memoryview)
    assert result.readonly


def test_deserializer_reads_in_order() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04')
    assert not de.is_empty()
    assert de.peek_byte() == 1
    assert de.read_byte() == 1
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    assert de.read_byte() == 4
    assert de.is_empty()
    de.finalize()


def test_deserializer_end_of_stream() -> None:
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.is_empty()
    with pytest.raises(UnexpectedEndOfStream):
        de.peek_byte()
    with pytest.raises(UnexpectedEndOfStream):
        de.read_byte()


def test_deserializer_read_bytes() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03')
    with pytest.raises(UnexpectedEndOfStream, match='wanted 4, have 3'):
        de.read_bytes(4)
    # a failed exact read does not consume anything
    assert bytes(de.read_bytes(4, exact=False)) == b'\x01\x02\x03'
    with pytest.raises(ValueError):
        de.read_bytes(-1)


def test_deserializer_trailing_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    de.read_byte()
    with pytest.raises(ValueError, match='trailing data'):
        de.finalize()
    assert bytes(de.read_all()) == b'\x02'
    de.finalize()


def test_deserializer_accepts_any_buffer() -> None:
    for data in (b'\xac\x02', bytearray(b'\xac\x02'), memoryview(b'\xac\x02')):
        de = Deserializer.build_bytes_deserializer(data)
        assert bytes(de.read_all()) == b'\xac\x02'
