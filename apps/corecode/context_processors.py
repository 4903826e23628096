from django.conf import settings

from .session import build_session_context


def site_defaults(request):
    return {"site": settings.SITE_INFO}


def session_context(request):
    context = getattr(request, "session_context", None)
    if context is None:
        context = build_session_context(request.user)
    return {"session_context": context}
