GAME_TURN = b'\x9d\x2c\xe6\xbd'
GAME_AGE = b'\x84\x84\xc6\xd0'
PLAYER_LEADER = b'\xa1\xb2\xb7\x6b'
PLAYER_CIVILIZATION = b'\xbb\xe4\x9a\xaf'

KNOWN_MARKERS: dict[bytes, str] = {
    GAME_TURN: "CurrentTurn",
    GAME_AGE: "Age",
    # Same key hashes as HostLeader / HostCivilization in .Civ6Save files
    PLAYER_LEADER: "Leader",
    PLAYER_CIVILIZATION: "Civilization",
}


def marker_name(marker: bytes) -> str:
    """Known name of a marker, or its hex bytes"""
    return KNOWN_MARKERS.get(bytes(marker), bytes(marker).hex())
