"""
Console debug logging for the explorer loop.

Off by default; enable with EXPLORER_DEBUG=1 (or .env) or `main.py --debug`.
"""
import time

from config import DEBUG_EXPLORER

_enabled = DEBUG_EXPLORER
_last_log = {}


def set_debug(enabled: bool) -> None:
    """Turn debug logging on or off at runtime."""
    global _enabled
    _enabled = bool(enabled)


def debug_log(msg, throttle_key=None):
    if not _enabled:
        return
    # Throttle repeated messages
    if throttle_key:
        now = time.time()
        if throttle_key in _last_log and now - _last_log[throttle_key] < 1.0:
            return
        _last_log[throttle_key] = now
    print(f"[explorer] {msg}")
