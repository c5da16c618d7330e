"""Reader configuration."""

from dataclasses import dataclass


@dataclass
class ReaderConfig:
    """
    Options for AiffReader.

    parse_id3: decode embedded ID3 tags with mutagen; when False they are
        skipped during every scan.
    tolerate_missing_pad: accept a file whose last odd-length chunk has no
        trailing pad byte.
    """
    parse_id3: bool = True
    tolerate_missing_pad: bool = True
