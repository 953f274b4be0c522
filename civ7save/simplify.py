from dataclasses import dataclass
from typing import Any

from civ7save.chunks import Chunk, ChunkType
from civ7save.markers import marker_name
from civ7save.save import ParsedSave

SimplifiedValue = int | str | list["SimplifiedChunk"] | list[list["SimplifiedChunk"]]


@dataclass(frozen=True)
class SimplifiedChunk:
    """Marker and value only, offsets and type tags dropped"""
    marker: bytes
    value: SimplifiedValue


def _has_content(entry: SimplifiedChunk) -> bool:
    return isinstance(entry.value, int) or len(entry.value) > 0


def simplify(chunks: list[Chunk]) -> list[SimplifiedChunk]:
    result: list[SimplifiedChunk] = []
    for chunk in chunks:
        match chunk.type_:
            case ChunkType.UTF8_STRING | ChunkType.UTF16_STRING | ChunkType.NUMBER32:
                result.append(SimplifiedChunk(chunk.marker, chunk.value))

            case ChunkType.CHUNK_ARRAY:
                children = simplify(chunk.value)
                if any(_has_content(child) for child in children):
                    result.append(SimplifiedChunk(chunk.marker, children))

            case ChunkType.NESTED_ARRAY:
                items = [simplify(item) for item in chunk.value]
                if any(items):
                    result.append(SimplifiedChunk(chunk.marker, items))

            case _:
                # opaque payloads have nothing to show
                pass
    return result


def to_jsonable(tree: list[SimplifiedChunk] | list[list[SimplifiedChunk]]) -> list[Any]:
    """Plain lists and dicts, markers rendered by name where known"""
    result: list[Any] = []
    for entry in tree:
        if isinstance(entry, list):
            result.append(to_jsonable(entry))
            continue
        value = to_jsonable(entry.value) if isinstance(entry.value, list) else entry.value
        result.append({"marker": marker_name(entry.marker), "value": value})
    return result


def summarize(save: ParsedSave) -> dict[str, Any]:
    return {
        "turn": save.turn.value if save.turn else None,
        "age": save.age.value if save.age else None,
        "players": [{"civ": player.civ.value, "leader": player.leader.value}
                    for player in save.players],
    }
