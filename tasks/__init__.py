"""
Background tasks and the single place that decides how they run.
"""
import logging

from .config import TASK_CONFIG

logger = logging.getLogger("system.tasks")


def dispatch(task, *args):
    """
    Queue ``task`` on the Celery broker, or run it in-process.

    Tasks run inline when Celery is disabled for this environment
    (``ENV_TYPE=CPANEL``) or when ``settings.TASKS_RUN_INLINE`` is set, and
    also when the broker cannot be reached.
    """
    from django.conf import settings

    if TASK_CONFIG['USE_CELERY'] and not getattr(settings, 'TASKS_RUN_INLINE', False):
        try:
            result = task.delay(*args)
            logger.info(f"Queued {task.name}: {result.id}")
            return result
        except Exception as e:
            logger.warning(f"Broker unavailable for {task.name}, running inline: {e}")

    return task.apply(args=args)
