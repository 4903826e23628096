"""
Data gateway: the single handle every feature area uses to read and write rows
and to store uploaded files.

Tables are addressed by name (``news``, ``gallery``, ...) and resolved to
Django models through ``TABLES``. Writes always pass through ``full_clean()``
and recompute any derived fields the model declares, so invariants such as
the fee total are enforced here and nowhere else.
"""
import logging
import os
import uuid

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.core.files.storage import default_storage
from django.db import DatabaseError, transaction
from django.utils.module_loading import import_string
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


TABLES = {
    "news": "content.NewsItem",
    "gallery": "content.GalleryItem",
    "programs": "content.Program",
    "cultural_programs": "content.CulturalProgram",
    "fees": "finance.FeeStructure",
    "payments": "finance.PaymentRecord",
}

READ_ONLY_TABLES = {"payments"}


class GatewayError(Exception):
    """Raised when a read or write against the backing store fails"""

    def __init__(self, message, table=None, operation=None):
        super().__init__(message)
        self.table = table
        self.operation = operation


class RowNotFound(GatewayError):
    """Raised when a row addressed by id does not exist"""


class DataGateway:
    """Table-addressed access to the relational store and object storage"""

    def __init__(self, storage=None, using="default"):
        self.storage = storage or default_storage
        self.using = using

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def model_for(self, table):
        try:
            return apps.get_model(TABLES[table])
        except KeyError:
            raise GatewayError(
                _("Unknown table: %(table)s") % {"table": table},
                table=table,
                operation="resolve",
            )

    def select(self, table, order_by="-created_at", **filters):
        """Return every row of ``table`` matching ``filters``, ordered by ``order_by``"""
        model = self.model_for(table)
        try:
            queryset = model.objects.using(self.using).filter(**filters)
            if order_by:
                queryset = queryset.order_by(order_by)
            return list(queryset)
        except DatabaseError as e:
            logger.warning(f"Select on '{table}' failed: {e}")
            raise GatewayError(str(e), table=table, operation="select") from e

    def get(self, table, pk):
        model = self.model_for(table)
        try:
            return model.objects.using(self.using).get(pk=pk)
        except ObjectDoesNotExist as e:
            raise RowNotFound(
                _("%(table)s row %(pk)s not found") % {"table": table, "pk": pk},
                table=table,
                operation="get",
            ) from e
        except DatabaseError as e:
            logger.warning(f"Get {table}#{pk} failed: {e}")
            raise GatewayError(str(e), table=table, operation="get") from e

    def insert(self, table, values):
        self._check_writable(table, "insert")
        model = self.model_for(table)
        instance = model()
        return self._write(table, instance, values, "insert")

    def update(self, table, pk, values):
        """Update one row by id. Last write wins; there is no version check."""
        self._check_writable(table, "update")
        instance = self.get(table, pk)
        return self._write(table, instance, values, "update")

    def delete(self, table, pk):
        self._check_writable(table, "delete")
        instance = self.get(table, pk)
        try:
            with transaction.atomic(using=self.using):
                instance.delete(using=self.using)
        except DatabaseError as e:
            logger.error(f"Delete {table}#{pk} failed: {e}")
            raise GatewayError(str(e), table=table, operation="delete") from e
        logger.info(f"Deleted {table}#{pk}")
        return instance

    def _check_writable(self, table, operation):
        if table in READ_ONLY_TABLES:
            raise GatewayError(
                _("Table %(table)s is read-only") % {"table": table},
                table=table,
                operation=operation,
            )

    def _write(self, table, instance, values, operation):
        for field, value in values.items():
            setattr(instance, field, value)

        self._apply_derived(instance, values)
        instance.full_clean()

        try:
            with transaction.atomic(using=self.using):
                instance.save(using=self.using)
        except DatabaseError as e:
            logger.error(f"{operation.title()} on '{table}' failed: {e}")
            raise GatewayError(str(e), table=table, operation=operation) from e

        logger.info(f"{operation.title()} {table}#{instance.pk}")
        return instance

    @staticmethod
    def _apply_derived(instance, values):
        """
        Recompute derived fields declared on the model as
        ``DERIVED_FIELDS = {"field": "method_name"}``.

        A caller-supplied value that disagrees with the computed one is
        rejected instead of being silently overwritten.
        """
        derived = getattr(instance, "DERIVED_FIELDS", {})
        errors = {}
        for field, method_name in derived.items():
            computed = getattr(instance, method_name)()
            supplied = values.get(field)
            if supplied is not None and supplied != computed:
                errors[field] = _(
                    "%(field)s must equal %(computed)s, got %(supplied)s"
                ) % {"field": field, "computed": computed, "supplied": supplied}
            setattr(instance, field, computed)
        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Object storage
    # ------------------------------------------------------------------

    def upload(self, bucket, file):
        """Store ``file`` under ``<bucket>/<random name>.<ext>`` and return the stored path"""
        ext = os.path.splitext(file.name)[1].lower()
        path = f"{bucket}/{uuid.uuid4().hex}{ext}"
        try:
            stored = self.storage.save(path, file)
        except OSError as e:
            logger.error(f"Upload to '{bucket}' failed: {e}")
            raise GatewayError(str(e), table=bucket, operation="upload") from e
        logger.info(f"Uploaded {stored}")
        return stored

    def public_url(self, path):
        return self.storage.url(path)

    def remove(self, path):
        """Delete a stored object; missing objects are ignored"""
        if not path:
            return False
        try:
            if self.storage.exists(path):
                self.storage.delete(path)
                logger.info(f"Removed stored file {path}")
                return True
            logger.warning(f"File not found in storage: {path}")
        except OSError as e:
            logger.error(f"Error deleting file {path}: {e}")
        return False


_gateway = None


def get_gateway():
    """Return the gateway configured by ``settings.DATA_GATEWAY``"""
    global _gateway
    if _gateway is None:
        gateway_class = import_string(settings.DATA_GATEWAY)
        _gateway = gateway_class()
    return _gateway


def reset_gateway():
    global _gateway
    _gateway = None
