#!/usr/bin/env python3
"""
Example: Basic pattern decoding

Shows how to decode a SPLICE file and walk its tracks.
"""

import sys

sys.path.insert(0, "..")

from splicedrum import SpliceError, decode_file, render_pattern


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "pattern_1.splice"

    try:
        pattern = decode_file(path)
    except FileNotFoundError:
        print(f"File not found: {path}")
        return 1
    except SpliceError as e:
        print(f"Cannot decode {path}: {e} ({e.kind.name})")
        return 1

    # Canonical text
    print(render_pattern(pattern), end="")
    print()

    # Tracks
    print("Active steps:")
    for track in pattern.tracks:
        steps = ", ".join(str(i + 1) for i in track.active_steps) or "none"
        print(f"  ({track.id}) {track.name}: {steps}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
