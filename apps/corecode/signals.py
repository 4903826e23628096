"""
Observers for sign-in state changes and gateway configuration.
"""
import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out, user_login_failed
from django.core.signals import setting_changed
from django.dispatch import receiver

from .gateway import reset_gateway

logger = logging.getLogger(__name__)


@receiver(user_logged_in)
def log_sign_in(sender, request, user, **kwargs):
    logger.info(f"🔓 Signed in: {user.email or user.get_username()}")


@receiver(user_logged_out)
def log_sign_out(sender, request, user, **kwargs):
    if user is not None:
        logger.info(f"🔒 Signed out: {user.email or user.get_username()}")


@receiver(user_login_failed)
def log_failed_sign_in(sender, credentials, request=None, **kwargs):
    logger.warning(f"❌ Failed sign-in for: {credentials.get('username', '')}")


@receiver(setting_changed)
def reset_gateway_on_setting_change(sender, setting, **kwargs):
    if setting in ("DATA_GATEWAY", "STORAGES"):
        reset_gateway()
