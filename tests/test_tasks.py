from unittest import mock

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from tasks import dispatch
from tasks.config import TASK_CONFIG
from tasks.system_tasks import content_fallback_alert_task, remove_stored_file_task


def test_dispatch_runs_inline_when_configured():
    path = default_storage.save("fee-structures/old.png", ContentFile(b"x"))

    result = dispatch(remove_stored_file_task, path)

    assert result.get()["removed"] is True
    assert not default_storage.exists(path)


def test_dispatch_queues_on_broker(settings, monkeypatch):
    settings.TASKS_RUN_INLINE = False
    monkeypatch.setitem(TASK_CONFIG, "USE_CELERY", True)

    with mock.patch.object(remove_stored_file_task, "delay") as delay:
        dispatch(remove_stored_file_task, "fee-structures/a.png")

    delay.assert_called_once_with("fee-structures/a.png")


def test_dispatch_runs_inline_when_broker_is_down(settings, monkeypatch):
    settings.TASKS_RUN_INLINE = False
    monkeypatch.setitem(TASK_CONFIG, "USE_CELERY", True)

    with mock.patch.object(remove_stored_file_task, "delay", side_effect=ConnectionError("refused")):
        result = dispatch(remove_stored_file_task, "fee-structures/missing.png")

    assert result.get()["removed"] is False


def test_fallback_alert_without_admins(mailoutbox):
    result = content_fallback_alert_task.apply(args=("news", "timeout")).get()

    assert result == {"success": False, "reason": "no_admin_emails", "table": "news"}
    assert mailoutbox == []


def test_fallback_alert_mails_admins(settings, mailoutbox):
    settings.ADMINS = [("Ops", "ops@jptt.edu")]

    content_fallback_alert_task.apply(args=("gallery", "relation does not exist")).get()

    assert len(mailoutbox) == 1
    assert "relation does not exist" in mailoutbox[0].body
