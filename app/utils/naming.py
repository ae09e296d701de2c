import secrets
import time


def unique_name(prefix: str, suffix: str = "") -> str:
    """Build a per-request filesystem name: ``{prefix}-{ns timestamp}-{random}{suffix}``."""
    return f"{prefix}-{time.time_ns()}-{secrets.token_hex(6)}{suffix}"
