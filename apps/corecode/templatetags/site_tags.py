from django import template

from apps.corecode.utils import format_date_long, format_date_short, format_inr

register = template.Library()


@register.filter
def inr(value):
    return format_inr(value)


@register.filter
def long_date(value):
    return format_date_long(value)


@register.filter
def short_date(value):
    return format_date_short(value)


@register.filter
def attr(obj, name):
    """Look up ``name`` on ``obj``; used by the generic management table"""
    value = getattr(obj, name, "")
    return value() if callable(value) else value


@register.filter
def status_badge(status):
    return {
        "completed": "badge-success",
        "pending": "badge-warning",
        "failed": "badge-danger",
        "upcoming": "badge-info",
        "ongoing": "badge-success",
    }.get(status, "badge-secondary")
