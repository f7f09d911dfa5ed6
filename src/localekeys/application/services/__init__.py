"""Application services.

discover_all() is the application-wide entry point: it finds scan roots
among loaded modules and discovers every one of them.
"""

from localekeys.application.services.sweep import ScanRoots, discover_all, find_scan_roots

__all__ = [
    "ScanRoots",
    "discover_all",
    "find_scan_roots",
]
