from django import template
from django.urls import NoReverseMatch, reverse

from apps.corecode.policy import get_user_role as policy_user_role

register = template.Library()


PUBLIC_NAV_ITEMS = [
    {"title": "Home", "url": "content:home"},
    {"title": "News", "url": "content:news"},
    {"title": "Gallery", "url": "content:gallery"},
    {"title": "Programs", "url": "content:programs"},
    {"title": "Cultural Programs", "url": "content:cultural_programs"},
    {"title": "Student Fees", "url": "finance:student_fees"},
]

ADMIN_NAV_ITEMS = [
    {"title": "Dashboard", "url": "corecode:admin_panel"},
    {"title": "News", "url": "content:news_manage"},
    {"title": "Gallery", "url": "content:gallery_manage"},
    {"title": "Programs", "url": "content:program_manage"},
    {"title": "Cultural Programs", "url": "content:cultural_manage"},
    {"title": "Fees", "url": "finance:fee_structure_list"},
]


@register.inclusion_tag("corecode/navigation/public_nav.html", takes_context=True)
def public_navigation(context):
    """Top navigation for the public site - only includes existing URLs"""
    request = context.get("request")
    return {"nav_items": _resolve(PUBLIC_NAV_ITEMS, request), "request": request}


@register.inclusion_tag("corecode/navigation/admin_nav.html", takes_context=True)
def admin_navigation(context):
    """Management panel tabs - only includes existing URLs"""
    request = context.get("request")
    return {"nav_items": _resolve(ADMIN_NAV_ITEMS, request), "request": request}


@register.simple_tag(takes_context=True)
def get_user_role(context):
    """Determine user role for navigation"""
    request = context.get("request")
    if not request:
        return "public"
    return policy_user_role(request.user)


def _resolve(items, request):
    current = request.path if request else ""
    resolved = []
    for item in items:
        try:
            href = reverse(item["url"])
        except NoReverseMatch:
            continue
        resolved.append({**item, "href": href, "active": current == href})
    return resolved
