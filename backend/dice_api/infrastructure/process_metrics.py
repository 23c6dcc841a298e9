"""Process Metrics — uptime and memory figures for the health endpoint.

Invariants:
    - Uptime measured with a monotonic clock from this module's import, which
      happens while the app is built at startup; it excludes interpreter boot
      and so reads slightly lower than a process-start uptime
    - rss and maxRss are byte counts (ru_maxrss normalised from KiB on Linux)
"""

import gc
import os
import resource
import sys
import time

_started_at = time.monotonic()


def uptime_seconds() -> float:
    return time.monotonic() - _started_at


def _current_rss_bytes() -> int:
    """Resident set size from /proc; falls back to peak RSS elsewhere."""
    try:
        with open("/proc/self/statm") as f:
            resident_pages = int(f.read().split()[1])
        return resident_pages * os.sysconf("SC_PAGE_SIZE")
    except OSError:
        return _max_rss_bytes()


def _max_rss_bytes() -> int:
    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # macOS reports bytes, Linux reports KiB
    return max_rss if sys.platform == "darwin" else max_rss * 1024


def memory_usage() -> dict:
    return {
        "rss": _current_rss_bytes(),
        "maxRss": _max_rss_bytes(),
        "gcObjects": len(gc.get_objects()),
    }
