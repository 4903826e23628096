"""
Celery configuration for the college site.
Named celery_app.py to avoid conflict with celery package.
"""
import os
from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'college_site.settings')

app = Celery('jptt_background_tasks')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

app.autodiscover_tasks()


import tasks.system_tasks  # noqa: E402,F401
