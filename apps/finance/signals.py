import logging

from django.db import transaction
from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from .models import FeeStructure

logger = logging.getLogger(__name__)


def _is_stored_path(value):
    return bool(value) and not value.startswith(("http://", "https://"))


def _queue_file_removal(path):
    """Remove a stored fee chart once the row change is committed"""
    from tasks import dispatch
    from tasks.system_tasks import remove_stored_file_task

    def _remove():
        try:
            dispatch(remove_stored_file_task, path)
        except Exception as e:
            logger.error(f"Failed to queue removal of {path}: {e}")

    transaction.on_commit(_remove)


@receiver(pre_save, sender=FeeStructure)
def remember_previous_image(sender, instance, **kwargs):
    instance._previous_image = ""
    if instance.pk:
        instance._previous_image = (
            sender.objects.filter(pk=instance.pk)
            .values_list("fee_structure_image", flat=True)
            .first()
            or ""
        )


@receiver(post_save, sender=FeeStructure)
def remove_replaced_image(sender, instance, created, **kwargs):
    previous = getattr(instance, "_previous_image", "")
    if previous != instance.fee_structure_image and _is_stored_path(previous):
        logger.info(f"Fee structure #{instance.pk} image replaced, removing {previous}")
        _queue_file_removal(previous)


@receiver(post_delete, sender=FeeStructure)
def remove_deleted_image(sender, instance, **kwargs):
    if _is_stored_path(instance.fee_structure_image):
        logger.info(f"Fee structure #{instance.pk} deleted, removing {instance.fee_structure_image}")
        _queue_file_removal(instance.fee_structure_image)
