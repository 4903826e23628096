#!/usr/bin/env python
"""
CPanel task runner - executes tasks synchronously when Celery is not available
"""
import os
import sys
import django
import logging

# Setup Django
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'college_site.settings')
django.setup()

from tasks.system_tasks import content_fallback_alert_task, remove_stored_file_task  # noqa: E402

logging.basicConfig(level=logging.INFO, format='[%(asctime)s] %(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def run_fallback_alert(table, error=None):
    logger.info(f"Sending content fallback alert for table: {table}")
    return content_fallback_alert_task.apply(args=(table, error)).get()


def run_remove_stored_file(path):
    logger.info(f"Removing stored file: {path}")
    return remove_stored_file_task.apply(args=(path,)).get()


COMMANDS = {
    'fallback_alert': (run_fallback_alert, "fallback_alert <table> [error]"),
    'remove_file': (run_remove_stored_file, "remove_file <path>"),
}


def main(argv):
    # Called from cron, e.g. python cpanel_tasks/run_tasks.py remove_file fee-structures/abc.png
    if len(argv) < 2:
        print("No command specified")
        return 1

    entry = COMMANDS.get(argv[1])
    if entry is None or len(argv) < 3:
        print("Unknown command. Available commands:")
        for _, usage in COMMANDS.values():
            print(f"  {usage}")
        return 1

    func, _ = entry
    result = func(*argv[2:])
    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
