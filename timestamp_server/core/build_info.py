# File: timestamp_server/core/build_info.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import datetime as dt
import logging
import re
from typing import Optional, Union

logger = logging.getLogger("timestamp_server.build_info")

VERSION_FILE = "VERSION"
TIMESTAMP_FILE = "TIMESTAMP"
UNKNOWN = "unknown"

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)

# optional whitespace, optional sign, digits; trailing junk is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

@dataclass(frozen=True)
class BuildFileRead:
    """Outcome of reading one build artifact. Exactly one of value/error is set."""
    path: Path
    value: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_default(self, default: str = UNKNOWN) -> str:
        return self.value if self.ok else default

@dataclass(frozen=True)
class BuildInfo:
    version: str
    build_time: str
    pretty_build_time: str

def read_build_file(path: Union[str, Path]) -> BuildFileRead:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Build file missing: %s", path)
        return BuildFileRead(path=path, error="missing")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Build file unreadable: %s (%s)", path, e)
        return BuildFileRead(path=path, error=str(e))
    return BuildFileRead(path=path, value=text.strip())

def parse_epoch(text: str) -> int:
    m = _LEADING_INT.match(text or "")
    return int(m.group(1)) if m else 0

def pretty_build_time(build_time: str) -> str:
    try:
        when = EPOCH + dt.timedelta(seconds=parse_epoch(build_time))
    except OverflowError:
        when = EPOCH
    # %Y is not zero-padded for years < 1000 on every libc
    return f"{when.year:04d}-{when:%m-%d %H:%M:%S} UTC"

def load_build_info(base_dir: Union[str, Path] = "") -> BuildInfo:
    base = Path(base_dir) if base_dir else Path.cwd()
    version = read_build_file(base / VERSION_FILE).or_default()
    build_time = read_build_file(base / TIMESTAMP_FILE).or_default()
    return BuildInfo(
        version=version,
        build_time=build_time,
        pretty_build_time=pretty_build_time(build_time),
    )
