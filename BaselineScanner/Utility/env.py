"""Environment helpers (env loading and scanner settings)"""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_SIZE_UNITS = {"kb": 1024, "mb": 1024 ** 2, "gb": 1024 ** 3, "b": 1}


def load_env_file(filepath: str = ".env") -> None:
    """Load KEY=VALUE pairs from a .env file; variables already set in the environment win."""
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as e:
        logger.warning("Ignoring unreadable .env file %s: %s", filepath, e)
        return
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):]
        if "=" not in line:
            continue
        key, val = line.split("=", 1)
        key = key.strip()
        val = val.strip()
        if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
            val = val[1:-1]
        os.environ.setdefault(key, val)


def parse_size(value: str) -> int:
    """Parse sizes such as '50mb', '512kb' or '1048576' into bytes."""
    text = str(value).strip().lower()
    for suffix in ("kb", "mb", "gb", "b"):
        if text.endswith(suffix):
            number = text[: -len(suffix)].strip()
            return int(float(number) * _SIZE_UNITS[suffix])
    return int(text)


"""Runtime settings for the scanner, read from the environment."""
@dataclass(frozen=True)
class ScannerSettings:
    github_api_root: str = "https://api.github.com"
    github_root: str = "https://github.com"
    github_token: Optional[str] = None
    max_archive_size: int = 50 * 1024 ** 2
    max_extracted_size: int = 200 * 1024 ** 2
    request_timeout: float = 30.0
    catalog_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScannerSettings":
        environ = os.environ if environ is None else environ
        try:
            return cls(
                github_api_root=environ.get("GITHUB_API_ROOT", cls.github_api_root),
                github_root=environ.get("GITHUB_ROOT", cls.github_root),
                github_token=environ.get("GITHUB_TOKEN") or environ.get("GH_TOKEN"),
                max_archive_size=parse_size(environ.get("MAX_ARCHIVE_SIZE", "50mb")),
                max_extracted_size=parse_size(environ.get("MAX_EXTRACTED_SIZE", "200mb")),
                request_timeout=float(environ.get("REQUEST_TIMEOUT", cls.request_timeout)),
                catalog_path=environ.get("BASELINE_CATALOG_PATH") or None,
            )
        except ValueError as e:
            raise ValueError(f"Invalid scanner configuration: {e}") from e
