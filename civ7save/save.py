import logging
from dataclasses import dataclass
from itertools import chain

from civ7save import markers
from civ7save.chunks import Buffer, Chunk, ChunkType, read_chunks, read_uint32
from civ7save.errors import NotASaveFile

logger = logging.getLogger(__name__)

MAGIC = b'CIV7'

# (count at, first chunk at) for each group, relative to where the previous
# group ended. Found by staring at save files; no rule behind them so far.
GROUP_LAYOUT: tuple[tuple[int, int], ...] = (
    (8, 12),
    (8, 12),
    (4, 8),
    (16, 20),
    (0, 4),
)


@dataclass(frozen=True, kw_only=True)
class RawChunkData:
    """The five top level runs of chunks, in file order"""
    group1: list[Chunk]
    group2: list[Chunk]
    group3: list[Chunk]
    group4: list[Chunk]
    group5: list[Chunk]

    @property
    def groups(self) -> tuple[list[Chunk], ...]:
        return (self.group1, self.group2, self.group3, self.group4, self.group5)

    @property
    def all_chunks(self) -> list[Chunk]:
        return list(chain.from_iterable(self.groups))


@dataclass(frozen=True, kw_only=True)
class Player:
    leader: Chunk
    civ: Chunk


@dataclass(frozen=True, kw_only=True)
class ParsedSave:
    turn: Chunk | None
    age: Chunk | None
    players: list[Player]
    raw: RawChunkData


def decode_raw(data: Buffer) -> RawChunkData:
    if (magic := bytes(data[:4])) != MAGIC:
        raise NotASaveFile(magic)

    groups: list[list[Chunk]] = []
    group_end = 0
    for number, (count_at, start_at) in enumerate(GROUP_LAYOUT, start=1):
        count = read_uint32(data, group_end + count_at)
        start = group_end + start_at
        logger.debug(f"At {hex(start)} ## GROUP {number}, expected {count} chunks")
        chunks = read_chunks(data, start, count)
        groups.append(chunks)
        # an empty group ends where it would have started
        group_end = chunks[-1].end_offset if chunks else start

    if group_end != len(data):
        logger.debug(f"Parsed all groups, {hex(len(data) - group_end)} bytes left after {hex(group_end)}")

    group1, group2, group3, group4, group5 = groups
    return RawChunkData(group1=group1,
                        group2=group2,
                        group3=group3,
                        group4=group4,
                        group5=group5)


def _find(chunks: list[Chunk], marker: bytes) -> Chunk | None:
    return next((chunk for chunk in chunks if chunk.marker == marker), None)


def _find_non_empty(chunks: list[Chunk], marker: bytes) -> Chunk | None:
    return next((chunk for chunk in chunks if chunk.marker == marker and chunk.value), None)


def extract(raw: RawChunkData) -> ParsedSave:
    players: list[Player] = []
    for chunk in raw.group3:
        if chunk.type_ != ChunkType.CHUNK_ARRAY:
            continue
        leader = _find_non_empty(chunk.value, markers.PLAYER_LEADER)
        civ = _find_non_empty(chunk.value, markers.PLAYER_CIVILIZATION)
        if leader is None or civ is None:
            logger.debug(f"At {hex(chunk.offset)}: no leader/civilization pair, skipping")
            continue
        players.append(Player(leader=leader, civ=civ))
    logger.debug(f"Found {len(players)} players")

    return ParsedSave(turn=_find(raw.group1, markers.GAME_TURN),
                      age=_find(raw.group1, markers.GAME_AGE),
                      players=players,
                      raw=raw)


def decode(data: Buffer) -> ParsedSave:
    return extract(decode_raw(data))
