"""
Configuration for background tasks - NO EARLY DJANGO IMPORTS
"""
import os
import logging

logger = logging.getLogger(__name__)

# cPanel-style hosting has no worker process; tasks run inline there
ENV_TYPE = os.environ.get('ENV_TYPE', 'STANDARD').upper()
IS_CPANEL = ENV_TYPE == 'CPANEL'

BROKER_URL = os.environ.get('CELERY_BROKER_URL', 'redis://localhost:6379/0')
RESULT_BACKEND = os.environ.get('CELERY_RESULT_BACKEND', 'redis://localhost:6379/1')

TASK_CONFIG = {
    'USE_CELERY': not IS_CPANEL,
    'IS_CPANEL': IS_CPANEL,
    'ENV_TYPE': ENV_TYPE,
    'BROKER_URL': BROKER_URL,
    'RESULT_BACKEND': RESULT_BACKEND,
    'QUEUE_NAME': os.environ.get('CELERY_QUEUE_NAME', 'celery'),
}

logger.debug(f"Task configuration: env={ENV_TYPE} broker={BROKER_URL}")
