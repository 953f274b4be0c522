"""Byte-level writers for building .Civ7Save fixtures in memory"""
from civ7save.chunks import ChunkType


def u16(x: int) -> bytes:
    return x.to_bytes(2, "little", signed=False)


def u32(x: int) -> bytes:
    return x.to_bytes(4, "little", signed=False)


def header(marker: bytes, type_: int) -> bytes:
    assert len(marker) == 4
    return marker + u32(type_) + b'\0\0\0\0'


def number(marker: bytes, value: int) -> bytes:
    return header(marker, ChunkType.NUMBER32) + b'\0' * 8 + u32(value)


def utf8(marker: bytes, text: str) -> bytes:
    encoded = text.encode("utf-8") + b'\0'
    return header(marker, ChunkType.UTF8_STRING) + u16(len(encoded)) + b'\0' * 6 + encoded


def utf16(marker: bytes, text: str) -> bytes:
    encoded = text.encode("utf-16-le") + b'\0\0'
    return (header(marker, ChunkType.UTF16_STRING) + u16(len(encoded) // 2)
            + b'\0' * 6 + encoded)


def fixed12(marker: bytes, payload: bytes, type_: int = ChunkType.UNKNOWN_1) -> bytes:
    assert len(payload) == 12
    return header(marker, type_) + payload


def unknown9(marker: bytes, entries: bytes) -> bytes:
    assert len(entries) % 4 == 0
    return header(marker, ChunkType.UNKNOWN_9) + u16(len(entries) // 4) + b'\0' * 6 + entries


def unknown64(marker: bytes, prefix: bytes, entries: bytes,
              type_: int = ChunkType.UNKNOWN_10) -> bytes:
    assert len(prefix) == 4 and len(entries) % 8 == 0
    return header(marker, type_) + u16(len(entries) // 8) + b'\0\0' + prefix + entries


def unknown32(marker: bytes, payload: bytes) -> bytes:
    return header(marker, ChunkType.UNKNOWN_32) + b'\0' * 4 + u32(len(payload)) + payload


def chunk_array(marker: bytes, children: list[bytes]) -> bytes:
    return (header(marker, ChunkType.CHUNK_ARRAY) + b'\0' * 8 + u32(len(children))
            + b''.join(children))


def nested_array(marker: bytes, items: list[list[bytes]]) -> bytes:
    return (header(marker, ChunkType.NESTED_ARRAY) + b'\0' * 8 + u32(len(items))
            + b''.join(b'\0' * 16 + u32(len(item)) + b''.join(item) for item in items))


def save_file(group1: list[bytes] = (), group2: list[bytes] = (), group3: list[bytes] = (),
              group4: list[bytes] = (), group5: list[bytes] = (),
              trailer: bytes = b'') -> bytes:
    """Lay out five groups the way the game writes them"""
    return (b'CIV7' + b'\0' * 4 + u32(len(group1)) + b''.join(group1)
            + b'\0' * 8 + u32(len(group2)) + b''.join(group2)
            + b'\0' * 4 + u32(len(group3)) + b''.join(group3)
            + b'\0' * 16 + u32(len(group4)) + b''.join(group4)
            + u32(len(group5)) + b''.join(group5)
            + trailer)
