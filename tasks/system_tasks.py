"""
System-level background tasks.

Cross-cutting maintenance work that is not part of any one page: alerting
administrators when public listings are masking a storage failure, and
removing stored files that no row references any more.

Tasks here are safe to retry and keep their retries bounded.
"""

import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

logger = logging.getLogger("system.tasks")


# ---------------------------------------------------------------------------
# CONTENT FALLBACK ALERT
# ---------------------------------------------------------------------------

@shared_task(
    bind=True,
    name="system.content_fallback_alert",
    autoretry_for=(OSError,),
    retry_backoff=300,          # 5 minutes base backoff
    retry_backoff_max=1800,     # max 30 minutes
    retry_kwargs={"max_retries": 3},
)
def content_fallback_alert_task(self, table: str, error: str | None = None):
    """
    E-mail site administrators that a public listing is showing demo data.

    Visitors never see the failure, so this mail is the signal that the
    store behind ``table`` is unreachable or misconfigured.
    """
    task_id = self.request.id
    timestamp = timezone.now()

    admin_emails = [email for _, email in getattr(settings, "ADMINS", []) if email]
    if not admin_emails:
        logger.warning(
            "[%s] No ADMINS configured; fallback alert for '%s' not e-mailed",
            task_id,
            table,
        )
        return {"success": False, "reason": "no_admin_emails", "table": table}

    site_name = settings.SITE_INFO.get("short_name", "College Website")
    subject = f"[{site_name}] Content fallback: {table}"

    message = f"""
CONTENT FALLBACK ALERT

Table: {table}
Time: {timestamp.strftime('%Y-%m-%d %H:%M:%S')}

The public pages are showing built-in demo records for this table because
reading it failed:

{error or 'No error details provided'}

Environment: {"Development" if settings.DEBUG else "Production"}
"""

    send_mail(
        subject=subject,
        message=message.strip(),
        from_email=getattr(settings, "DEFAULT_FROM_EMAIL", None),
        recipient_list=admin_emails,
        fail_silently=False,
    )

    logger.info("[%s] Fallback alert for '%s' sent to %d admin(s)", task_id, table, len(admin_emails))
    return {
        "success": True,
        "table": table,
        "sent_to": admin_emails,
        "sent_at": timestamp.isoformat(),
    }


# ---------------------------------------------------------------------------
# STORAGE CLEANUP
# ---------------------------------------------------------------------------

@shared_task(
    name="system.remove_stored_file",
    autoretry_for=(OSError,),
    retry_backoff=600,          # 10 minutes
    retry_kwargs={"max_retries": 2},
)
def remove_stored_file_task(path: str):
    """Delete one object from file storage; a missing object is not an error"""
    from apps.corecode.gateway import get_gateway

    removed = get_gateway().remove(path)
    logger.info("Stored file cleanup for %s: %s", path, "removed" if removed else "nothing to remove")
    return {"success": True, "path": path, "removed": removed}
