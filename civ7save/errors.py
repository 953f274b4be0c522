class Civ7SaveError(RuntimeError):
    """Anything that stops a save from decoding; carries the byte offset"""

    def __init__(self, message: str, *, offset: int):
        super().__init__(f"{message} at {hex(offset)}")
        self.offset = offset


class NotASaveFile(Civ7SaveError):
    def __init__(self, magic: bytes):
        super().__init__(f"Not a CIV 7 save file, magic bytes are {magic!r}",
                         offset=0)
        self.magic = magic


class UnknownChunkType(Civ7SaveError):
    def __init__(self, type_: int, *, offset: int):
        super().__init__(f"Could not parse chunk of type {type_} ({hex(type_)})",
                         offset=offset)
        self.type_ = type_


class TruncatedInput(Civ7SaveError):
    def __init__(self, *, offset: int, needed: int, size: int):
        super().__init__(
            f"Unexpected end of data (need {needed} bytes, buffer is {hex(size)} long)",
            offset=offset)
        self.needed = needed
        self.size = size
