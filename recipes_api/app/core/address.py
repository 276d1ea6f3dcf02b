"""
Listen address parsing.

Addresses are written ``host:port``.  The host may be omitted
(``:5000``), which binds every interface, and IPv6 hosts are written
in brackets (``[::1]:5000``).
"""

from typing import Tuple

DEFAULT_HOST = "0.0.0.0"


def parse_addr(addr: str) -> Tuple[str, int]:
    """Split ``addr`` into a ``(host, port)`` pair.

    Raises ``ValueError`` if the port is missing, not a number or out
    of the 0‑65535 range.
    """
    host, sep, port_text = addr.strip().rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {addr!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in address {addr!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in address {addr!r}")
    return host or DEFAULT_HOST, port
