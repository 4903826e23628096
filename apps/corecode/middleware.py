from django.utils.deprecation import MiddlewareMixin

from .session import build_session_context


class SessionContextMiddleware:
    """Attach the per-request SessionContext as ``request.session_context``"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.session_context = build_session_context(request.user)
        request.content_fallback_tables = []

        response = self.get_response(request)

        return response


class ContentFallbackHeaderMiddleware(MiddlewareMixin):
    """
    Mark responses built from fallback data with ``X-Content-Fallback``
    so monitoring can tell them apart from genuinely empty tables.
    """

    HEADER = "X-Content-Fallback"

    def process_response(self, request, response):
        tables = getattr(request, "content_fallback_tables", None)
        if tables:
            response[self.HEADER] = ",".join(sorted(set(tables)))
        return response
