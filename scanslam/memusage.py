"""Reporting the data and virtual memory size of the running process."""

from __future__ import annotations

import os
import sys
from typing import Dict, Optional, TextIO

_FIELDS = ("VmData:", "VmSize:")


def memory_usage(status_path: Optional[str] = None) -> Dict[str, str]:
    """The ``VmData`` and ``VmSize`` entries of a process status file.

    Reads the status file of this process unless ``status_path`` is given.
    Entries that are absent, or an unreadable file, give no result.
    """
    if status_path is None:
        status_path = "/proc/%d/status" % os.getpid()
    try:
        with open(status_path, encoding="utf-8", errors="replace") as handle:
            tokens = iter(handle.read().split())
    except OSError:
        return {}
    usage: Dict[str, str] = {}
    for token in tokens:
        if token in _FIELDS:
            value = next(tokens, None)
            if value is not None:
                usage[token[:-1]] = value
    return usage


def print_memory_usage(stream: Optional[TextIO] = None) -> None:
    """Write the memory figures of this process, one ``#Name:\\tvalue`` line each."""
    out = sys.stderr if stream is None else stream
    for name, value in memory_usage().items():
        out.write("#%s:\t%s\n" % (name, value))