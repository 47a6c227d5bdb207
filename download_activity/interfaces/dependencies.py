"""FastAPI dependency utilities."""

from fastapi import Request

from download_activity.domain.entities import RequestContext


def get_request_context(request: Request) -> RequestContext:
    """Capture the parts of ``request`` that classify a file access.

    Use as ``Depends(get_request_context)`` in the host's download routes.
    """

    return RequestContext(
        user_agent=request.headers.get("user-agent", ""),
        query=dict(request.query_params),
        path_info=request.url.path,
    )


__all__ = ["get_request_context"]
