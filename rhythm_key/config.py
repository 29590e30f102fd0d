"""Runtime configuration for rhythm-key capture and digesting."""

from dataclasses import dataclass


@dataclass
class Config:
    """Runtime configuration."""

    # Digest
    bucket_width: int = 20  # milliseconds per quantization bucket

    # Capture
    terminator: str = "\n"  # Enter in cbreak mode

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(name)s %(levelname)s: %(message)s"
