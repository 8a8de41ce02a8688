"""Best-effort client address resolution."""

from fastapi import Request

UNKNOWN_ADDRESS = "unknown"


def resolve_source_address(request: Request) -> str:
    """Resolve the address a request came from.

    Prefers the first hop of X-Forwarded-For (the original client when
    behind a proxy), then the transport peer. The value is only stored for
    information and never trusted for decisions.

    Args:
        request: Incoming request

    Returns:
        Client address, or "unknown"
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    if request.client and request.client.host:
        return request.client.host

    return UNKNOWN_ADDRESS
