"""
Error types raised while scanning and laying out a file tree.
"""

from typing import Optional


class ScanError(Exception):
    """A path could not be scanned"""

    def __init__(self, path: str, message: str, cause: Optional[OSError] = None):
        super().__init__(f"{message}: {path}")
        self.path = path
        self.cause = cause


class InvalidRootError(ScanError):
    """Root path is missing or is not a directory"""

    def __init__(self, path: str, missing: bool):
        super().__init__(path, "Path not found" if missing else "Path must be a directory")
        self.missing = missing


class EntryScanError(ScanError):
    """A single directory entry could not be enumerated"""

    def __init__(self, path: str, cause: OSError):
        super().__init__(path, f"Cannot read entry ({cause.strerror or cause})", cause)


class LayoutError(ValueError):
    """Layout parameters or tree state do not allow positioning"""
