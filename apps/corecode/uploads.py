"""
Validation and storage of image attachments
"""
import logging

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from .gateway import get_gateway

logger = logging.getLogger(__name__)

MAX_IMAGE_SIZE = 5 * 1024 * 1024

FEE_STRUCTURE_BUCKET = "fee-structures"


def validate_image_upload(file):
    """
    Reject non-image or oversized files before anything touches storage.
    """
    content_type = getattr(file, "content_type", None) or ""
    if not content_type.startswith("image/"):
        raise ValidationError(_("Please upload an image file"), code="invalid_type")

    if file.size > MAX_IMAGE_SIZE:
        raise ValidationError(_("Image size should be less than 5MB"), code="too_large")

    return file


def store_image(file, bucket=FEE_STRUCTURE_BUCKET, gateway=None):
    """Validate and upload ``file``; returns the stored path"""
    validate_image_upload(file)
    gateway = gateway or get_gateway()
    return gateway.upload(bucket, file)
