"""Test configuration and fixtures."""

import struct

import pytest

# Pattern contents as (hw_version, tempo, [(id, name, grid), ...])
PATTERNS = {
    "pattern_1.splice": (
        "0.808-alpha",
        120.0,
        [
            (0, "kick", "x---|x---|x---|x---"),
            (1, "snare", "----|x---|----|x---"),
            (2, "clap", "----|x-x-|----|----"),
            (3, "hh-open", "--x-|--x-|x-x-|--x-"),
            (4, "hh-close", "x---|x---|----|x--x"),
            (5, "cowbell", "----|----|--x-|----"),
        ],
    ),
    "pattern_2.splice": (
        "0.808-alpha",
        98.4,
        [
            (0, "kick", "x---|----|x---|----"),
            (1, "snare", "----|x---|----|x---"),
            (3, "hh-open", "--x-|--x-|x-x-|--x-"),
            (5, "cowbell", "----|----|x---|----"),
        ],
    ),
    "pattern_3.splice": (
        "0.808-alpha",
        118.0,
        [
            (40, "kick", "x---|----|x---|----"),
            (1, "clap", "----|x---|----|x---"),
            (3, "hh-open", "--x-|--x-|x-x-|--x-"),
            (5, "low-tom", "----|---x|----|----"),
            (12, "mid-tom", "----|----|x---|----"),
            (9, "hi-tom", "----|----|-x--|----"),
        ],
    ),
    "pattern_4.splice": (
        "0.909",
        240.0,
        [
            (0, "SubKick", "----|----|----|----"),
            (1, "Kick", "x---|----|x---|----"),
            (99, "Maracas", "x-x-|x-x-|x-x-|x-x-"),
            (255, "Low Conga", "----|x---|----|x---"),
        ],
    ),
    "pattern_5.splice": (
        "0.708-alpha",
        999.0,
        [
            (1, "Kick", "x---|----|x---|----"),
            (2, "HiHat", "x-x-|x-x-|x-x-|x-x-"),
        ],
    ),
}

# pattern_5 carries junk after its declared payload, which must be ignored
TRAILING_JUNK = {"pattern_5.splice": b"SPLICE\x00\x00\x00\x00\x00\x00\x00\x2a"}


def grid_to_steps(grid: str) -> bytes:
    """Convert "x---|x---|..." to 16 step bytes."""
    return bytes(1 if c == "x" else 0 for c in grid if c != "|")


def encode_track(track_id: int, name, steps) -> bytes:
    """Encode one track record; steps may be a grid string or raw values."""
    if isinstance(name, str):
        name = name.encode("utf-8")
    if isinstance(steps, str):
        steps = grid_to_steps(steps)
    return bytes([track_id, 0, 0, 0, len(name)]) + name + bytes(steps)


def build_splice(
    hw_version: str = "0.808-alpha",
    tempo: float = 120.0,
    tracks=(),
    declared=None,
    trailing: bytes = b"",
) -> bytes:
    """
    Build SPLICE file bytes.

    Args:
        hw_version: Version string, zero padded to 11 bytes
        tempo: Tempo stored as float32
        tracks: Iterable of (id, name, steps)
        declared: Remaining byte count to write (default: actual payload size)
        trailing: Extra bytes appended after the payload

    Returns:
        Complete file contents
    """
    payload = bytearray()
    payload += hw_version.encode("ascii").ljust(11, b"\x00")
    payload += bytes(7)
    payload += struct.pack("<f", tempo)
    for track_id, name, steps in tracks:
        payload += encode_track(track_id, name, steps)

    if declared is None:
        declared = len(payload)

    return b"SPLICE" + bytes(7) + bytes([declared]) + bytes(payload) + trailing


@pytest.fixture
def splice_bytes():
    """Return the SPLICE byte builder."""
    return build_splice


@pytest.fixture
def track_record():
    """Return the track record encoder."""
    return encode_track


@pytest.fixture
def fixtures_dir(tmp_path):
    """Write the sample patterns to a temporary fixtures directory."""
    for name, (hw_version, tempo, tracks) in PATTERNS.items():
        data = build_splice(hw_version, tempo, tracks, trailing=TRAILING_JUNK.get(name, b""))
        (tmp_path / name).write_bytes(data)
    return tmp_path


@pytest.fixture
def pattern_1_file(fixtures_dir):
    """Return path to the first sample pattern."""
    return fixtures_dir / "pattern_1.splice"


@pytest.fixture
def pattern_1_data(pattern_1_file):
    """Return raw bytes of the first sample pattern."""
    with open(pattern_1_file, "rb") as f:
        return f.read()


@pytest.fixture
def kick_only_data():
    """The single-track example: one kick on every beat."""
    return build_splice("0.808-alpha", 120.0, [(0, "kick", "x---|x---|x---|x---")])
