import time
import logging

import redis
from django.core.management.base import BaseCommand, CommandError

from celery_app import app
from tasks.config import TASK_CONFIG

logger = logging.getLogger('system.tasks')


class Command(BaseCommand):
    help = 'Monitor Celery tasks and queue status'

    def add_arguments(self, parser):
        parser.add_argument(
            '--interval',
            type=int,
            default=5,
            help='Monitoring interval in seconds'
        )
        parser.add_argument(
            '--once',
            action='store_true',
            help='Run once and exit'
        )

    def handle(self, *args, **options):
        if not TASK_CONFIG['USE_CELERY']:
            self.stdout.write("Celery is disabled for this environment; tasks run inline")
            return

        interval = options['interval']

        self.stdout.write("Starting Celery Task Monitor")
        self.stdout.write(f"   Interval: {interval} seconds")
        self.stdout.write(f"   Broker: {TASK_CONFIG['BROKER_URL']}")
        self.stdout.write("-" * 50)

        client = redis.from_url(TASK_CONFIG['BROKER_URL'])
        try:
            while True:
                self.stdout.write(self.queue_status(client))
                if options['once']:
                    break
                time.sleep(interval)
        except KeyboardInterrupt:
            self.stdout.write("Monitor stopped by user")
        except redis.RedisError as e:
            logger.error(f"Task monitor lost the broker: {e}")
            raise CommandError(f"Broker unavailable: {e}")

    def queue_status(self, client):
        queue_length = client.llen(TASK_CONFIG['QUEUE_NAME'])
        parts = [f"Queue: {queue_length} waiting" if queue_length else "Queue: Empty"]

        active = app.control.inspect(timeout=1.0).active() or {}
        total_active = sum(len(running) for running in active.values())
        parts.append(f"Active: {total_active}")
        for worker, running in active.items():
            if running:
                names = sorted({t['name'] for t in running})
                parts.append(f"{worker.split('@')[0]}: {', '.join(names)}")

        return " | ".join(parts)
