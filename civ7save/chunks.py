from dataclasses import dataclass
from enum import IntEnum

from civ7save.errors import TruncatedInput, UnknownChunkType

Buffer = bytes | bytearray | memoryview

# marker + type tag + one 32-bit field every record carries
HEADER_SIZE = 12


class ChunkType(IntEnum):
    UNKNOWN_1 = 1
    UTF8_STRING = 2
    UTF16_STRING = 3
    NUMBER32 = 8
    UNKNOWN_9 = 9
    UNKNOWN_10 = 10
    UNKNOWN_11 = 11
    UNKNOWN_12 = 12
    UNKNOWN_17 = 17
    CHUNK_ARRAY = 29
    NESTED_ARRAY = 30
    UNKNOWN_32 = 32


ChunkValue = int | str | bytes | list["Chunk"] | list[list["Chunk"]]


@dataclass(frozen=True, kw_only=True)
class Chunk:
    """One tagged record: 4 byte marker, 4 byte type, 4 bytes unused, payload"""
    offset: int
    marker: bytes
    type_: ChunkType
    end_offset: int
    value: ChunkValue

    @property
    def data_start_offset(self) -> int:
        return self.offset + HEADER_SIZE


def _require(data: Buffer, offset: int, end: int) -> int:
    if offset < 0 or end > len(data):
        raise TruncatedInput(offset=offset, needed=end - offset, size=len(data))
    return end


def _read_int(data: Buffer, offset: int, size: int) -> int:
    _require(data, offset, offset + size)
    return int.from_bytes(data[offset:offset + size], byteorder="little", signed=False)


def _read_uint16(data: Buffer, offset: int) -> int:
    return _read_int(data, offset, 2)


def read_uint32(data: Buffer, offset: int) -> int:
    return _read_int(data, offset, 4)


def _read_bytes(data: Buffer, start: int, end: int) -> bytes:
    _require(data, start, end)
    return bytes(data[start:end])


def parse_chunk(data: Buffer, offset: int) -> Chunk:
    marker = _read_bytes(data, offset, offset + 4)
    raw_type = read_uint32(data, offset + 4)
    try:
        type_ = ChunkType(raw_type)
    except ValueError:
        raise UnknownChunkType(raw_type, offset=offset) from None

    data_start = offset + HEADER_SIZE
    value: ChunkValue

    match type_:
        case ChunkType.UNKNOWN_1 | ChunkType.UNKNOWN_12:
            # unknown 12 byte data
            end_offset = data_start + 12
            value = _read_bytes(data, data_start, end_offset)

        case ChunkType.UNKNOWN_9:
            # variable length, 32 bits per entry?
            count = _read_uint16(data, data_start)
            end_offset = _require(data, offset, data_start + 8 + count * 4)
            value = _read_bytes(data, data_start + 8, end_offset)

        case ChunkType.UNKNOWN_10 | ChunkType.UNKNOWN_11 | ChunkType.UNKNOWN_17:
            # variable length, 64 bits per entry?
            count = _read_uint16(data, data_start)
            end_offset = _require(data, offset, data_start + 8 + count * 8)
            value = _read_bytes(data, data_start + 4, end_offset)

        case ChunkType.NUMBER32:
            end_offset = data_start + 12
            value = read_uint32(data, data_start + 8)

        case ChunkType.UTF8_STRING:
            length = _read_uint16(data, data_start)
            end_offset = _require(data, offset, data_start + 8 + length)
            # last byte is the terminator
            value = bytes(data[data_start + 8:end_offset - 1]).decode(
                "utf-8", errors="replace")

        case ChunkType.UTF16_STRING:
            length = _read_uint16(data, data_start)
            end_offset = _require(data, offset, data_start + 8 + length * 2)
            value = bytes(data[data_start + 8:end_offset - 2]).decode(
                "utf-16-le", errors="replace")

        case ChunkType.CHUNK_ARRAY:
            count = read_uint32(data, data_start + 8)
            children = read_chunks(data, data_start + 12, count)
            end_offset = children[-1].end_offset if children else data_start + 12
            value = children

        case ChunkType.NESTED_ARRAY:
            count = read_uint32(data, data_start + 8)
            items: list[list[Chunk]] = []
            end_offset = data_start + 12
            for _ in range(count):
                sub_count = read_uint32(data, end_offset + 16)
                sub_chunks = read_chunks(data, end_offset + 20, sub_count)
                items.append(sub_chunks)
                end_offset = sub_chunks[-1].end_offset if sub_chunks else end_offset + 20
            value = items

        case ChunkType.UNKNOWN_32:
            # length lives 4 bytes further in than for the other variable types
            length = read_uint32(data, data_start + 4)
            end_offset = _require(data, offset, data_start + 8 + length)
            value = _read_bytes(data, data_start + 8, end_offset)

    return Chunk(offset=offset,
                 marker=marker,
                 type_=type_,
                 end_offset=end_offset,
                 value=value)


def read_chunks(data: Buffer, offset: int, count: int) -> list[Chunk]:
    """Read `count` back-to-back chunks starting at `offset`"""
    chunks: list[Chunk] = []
    for _ in range(count):
        chunks.append(parse_chunk(data, chunks[-1].end_offset if chunks else offset))
    return chunks
