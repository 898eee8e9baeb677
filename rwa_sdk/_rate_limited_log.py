"""
Thread-safe rate-limited logging.

Warnings that would repeat for every client instance (for example about a
plaintext RPC endpoint) are emitted once per hour per message.
"""
import logging
import threading
from typing import Optional

from cachetools import TTLCache

logger = logging.getLogger(__name__)

_LOG_TTL_SECONDS = 3600

_seen_messages = TTLCache(maxsize=100, ttl=_LOG_TTL_SECONDS)
_seen_messages_lock = threading.RLock()


def rate_limited_log(
    message: str,
    level: str = "warning",
    logger_instance: Optional[logging.Logger] = None
) -> bool:
    """
    Log ``message`` unless the same message was logged at this level recently.

    Args:
        message: Message to log
        level: Log level (debug, info, warning, error, critical)
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        True if the message was emitted, False if it was suppressed
    """
    log_instance = logger_instance or logger
    log_method = getattr(log_instance, level.lower(), log_instance.warning)
    key = f"{level}:{message}"

    with _seen_messages_lock:
        if key in _seen_messages:
            return False
        _seen_messages[key] = True

    log_method(message)
    return True


def reset_rate_limited_log() -> None:
    """Forget previously logged messages."""
    with _seen_messages_lock:
        _seen_messages.clear()
