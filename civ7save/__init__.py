from civ7save.chunks import Chunk, ChunkType, parse_chunk, read_chunks
from civ7save.errors import Civ7SaveError, NotASaveFile, TruncatedInput, UnknownChunkType
from civ7save.markers import KNOWN_MARKERS, marker_name
from civ7save.save import ParsedSave, Player, RawChunkData, decode, decode_raw, extract
from civ7save.simplify import SimplifiedChunk, simplify, summarize, to_jsonable

__all__ = [
    "Chunk",
    "ChunkType",
    "Civ7SaveError",
    "KNOWN_MARKERS",
    "NotASaveFile",
    "ParsedSave",
    "Player",
    "RawChunkData",
    "SimplifiedChunk",
    "TruncatedInput",
    "UnknownChunkType",
    "decode",
    "decode_raw",
    "extract",
    "marker_name",
    "parse_chunk",
    "read_chunks",
    "simplify",
    "summarize",
    "to_jsonable",
]
