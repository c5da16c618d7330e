#!/usr/bin/env python3
"""aiffinfo.py - inspection CLI for aiffreader.

Usage:
    python aiffinfo.py inspect <file.aiff>
    python aiffinfo.py chunks <file.aiff>
    python aiffinfo.py samples <file.aiff> [--frames N]

Output formats (append to any command):
    --format table    (default, human-readable)
    --format json     (machine-readable)
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Add aiffreader src to path
_src_dir = Path(__file__).parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from aiffreader import AiffReader, ChunkError, ReaderConfig


def load_reader(path: str, config: ReaderConfig, decode: bool = True) -> AiffReader:
    """Open an AIFF file and scan it. Exits on failure."""
    try:
        reader = AiffReader.from_file(path, config)
        if decode:
            reader.read_all()
        else:
            reader.locate()
    except (OSError, EOFError, ChunkError) as e:
        print(f"ERROR: Failed to load {path}: {e}", file=sys.stderr)
        sys.exit(1)
    return reader


def describe(reader: AiffReader) -> dict:
    """Collect the decoded form into plain data."""
    form = reader.form
    data = {"file": reader.filename, "duration": form.duration}

    if form.common:
        c = form.common
        data["common"] = {
            "channels": c.num_channels,
            "sample_frames": c.num_sample_frames,
            "sample_size": c.sample_size,
            "sample_rate": c.sample_rate,
        }
    if form.sound:
        data["sound"] = {
            "offset": form.sound.offset,
            "block_size": form.sound.block_size,
            "bytes": len(form.sound.sound_data),
        }
    data["texts"] = [{"type": t.chunk_type.name.lower(), "text": t.text} for t in form.texts or []]
    data["markers"] = [
        {"id": m.id, "position": m.position, "name": m.name}
        for chunk in form.markers or [] for m in chunk.markers
    ]
    if form.comments:
        data["comments"] = [
            {"timestamp": c.timestamp, "marker_id": c.marker_id, "text": c.text}
            for c in form.comments.comments
        ]
    if form.instrument:
        inst = form.instrument
        data["instrument"] = {
            "base_note": inst.base_note,
            "detune": inst.detune,
            "notes": [inst.low_note, inst.high_note],
            "velocities": [inst.low_velocity, inst.high_velocity],
            "gain": inst.gain,
        }
    data["applications"] = [a.application_signature.decode("latin-1") for a in form.apps or []]
    data["midi_chunks"] = len(form.midi or [])
    if reader.id3_tag is not None:
        data["id3"] = {key: str(frame) for key, frame in reader.id3_tag.items()}
    return data


def cmd_inspect(args, config):
    """Show everything decoded from the file."""
    reader = load_reader(args.file, config)
    if args.format == "json":
        print(json.dumps(describe(reader), indent=2))
    else:
        print(reader.summary())


def cmd_chunks(args, config):
    """List chunk offsets found by a skip-only scan."""
    reader = load_reader(args.file, config, decode=False)
    offsets = reader.offsets
    if args.format == "json":
        print(json.dumps(offsets, indent=2))
        return

    print(f"{'TAG':<6} OFFSET")
    print("─" * 20)
    for tag, offset in sorted(offsets.items(), key=lambda item: item[1]):
        print(f"{tag!r:<6} {offset:>8}")


def cmd_samples(args, config):
    """Print the first N sample frames."""
    reader = load_reader(args.file, config)
    try:
        frames = reader.frames()
    except (ChunkError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    head = frames[:args.frames].tolist()
    if args.format == "json":
        print(json.dumps({"frames": len(frames), "head": head}, indent=2))
        return

    for index, frame in enumerate(head):
        print(f"  [{index:>6}] " + " ".join(f"{v:>8}" for v in frame))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="aiffinfo",
        description="Inspect AIFF files: chunks, metadata and samples.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", choices=["table", "json"],
                        default="table", help="Output format (default: table)")
    parser.add_argument("--no-id3", action="store_true",
                        help="Skip embedded ID3 tags instead of decoding them")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")

    sub = parser.add_subparsers(dest="command", help="Command to run")

    # inspect
    p = sub.add_parser("inspect", help="Show decoded metadata")
    p.add_argument("file", help="Path to an AIFF file")

    # chunks
    p = sub.add_parser("chunks", help="List chunk offsets")
    p.add_argument("file", help="Path to an AIFF file")

    # samples
    p = sub.add_parser("samples", help="Print sample frames")
    p.add_argument("file", help="Path to an AIFF file")
    p.add_argument("--frames", "-n", type=int, default=10, help="Number of frames (default: 10)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    config = ReaderConfig(parse_id3=not args.no_id3)

    commands = {
        "inspect": cmd_inspect,
        "chunks": cmd_chunks,
        "samples": cmd_samples,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        cmd_func(args, config)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
