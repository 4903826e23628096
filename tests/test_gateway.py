import datetime
from unittest import mock

import pytest
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError

from apps.content.models import CulturalProgram, NewsItem
from apps.corecode.gateway import DataGateway, GatewayError, RowNotFound, get_gateway
from apps.finance.models import FeeStructure, PaymentRecord

FEE_VALUES = {
    "program_name": "Bachelor of Education (B.Ed)",
    "academic_year": "2024-25",
    "tuition_fee": 35000,
    "admission_fee": 5000,
    "examination_fee": 3000,
    "library_fee": 1000,
    "laboratory_fee": 1000,
    "other_fees": 0,
    "due_date": datetime.date(2024, 7, 15),
}


@pytest.fixture
def gateway():
    return get_gateway()


def test_get_gateway_uses_configured_class(gateway):
    assert isinstance(gateway, DataGateway)
    assert get_gateway() is gateway


def test_unknown_table_raises(gateway):
    with pytest.raises(GatewayError) as exc:
        gateway.select("students")
    assert exc.value.table == "students"


@pytest.mark.django_db
def test_select_ascending_when_order_key_has_no_prefix(gateway):
    for name, day in [("Debate", 20), ("Folk Art", 2), ("Puja", 14)]:
        CulturalProgram.objects.create(
            name=name, description="-", date=datetime.date(2024, 3, day), venue="Hall"
        )

    rows = gateway.select("cultural_programs", order_by="date")

    assert [row.name for row in rows] == ["Folk Art", "Puja", "Debate"]


@pytest.mark.django_db
def test_select_wraps_database_errors(gateway):
    with mock.patch.object(NewsItem.objects, "using", side_effect=DatabaseError("connection refused")):
        with pytest.raises(GatewayError) as exc:
            gateway.select("news")
    assert exc.value.operation == "select"
    assert "connection refused" in str(exc.value)


@pytest.mark.django_db
def test_get_missing_row_raises_row_not_found(gateway):
    with pytest.raises(RowNotFound):
        gateway.get("news", 999)


@pytest.mark.django_db
def test_insert_computes_fee_total(gateway):
    fee = gateway.insert("fees", FEE_VALUES)

    fee.refresh_from_db()
    assert fee.total_fee == 45000


@pytest.mark.django_db
def test_insert_accepts_matching_total(gateway):
    fee = gateway.insert("fees", {**FEE_VALUES, "total_fee": 45000})
    assert fee.total_fee == 45000


@pytest.mark.django_db
def test_insert_rejects_total_that_disagrees_with_items(gateway):
    with pytest.raises(ValidationError) as exc:
        gateway.insert("fees", {**FEE_VALUES, "total_fee": 50000})

    assert "total_fee" in exc.value.message_dict
    assert FeeStructure.objects.count() == 0


@pytest.mark.django_db
def test_update_recomputes_total_and_touches_one_row(gateway):
    first = gateway.insert("fees", FEE_VALUES)
    second = gateway.insert("fees", {**FEE_VALUES, "program_name": "D.El.Ed"})

    gateway.update("fees", first.pk, {"tuition_fee": 40000})

    first.refresh_from_db()
    second.refresh_from_db()
    assert first.tuition_fee == 40000
    assert first.total_fee == 50000
    assert second.total_fee == 45000


@pytest.mark.django_db
def test_insert_validates_fields(gateway):
    with pytest.raises(ValidationError):
        gateway.insert("news", {"title": "", "content": "x", "date": datetime.date(2024, 1, 1)})
    assert NewsItem.objects.count() == 0


@pytest.mark.django_db
def test_delete_removes_row(gateway):
    item = NewsItem.objects.create(title="Old", content="x", date=datetime.date(2024, 1, 1))

    gateway.delete("news", item.pk)

    assert not NewsItem.objects.filter(pk=item.pk).exists()


@pytest.mark.django_db
def test_deleting_fee_structure_leaves_payments_untouched(gateway, bed_fees, payments):
    before = dict(PaymentRecord.objects.values_list("pk", "fee_structure_id"))

    gateway.delete("fees", bed_fees.pk)

    assert not FeeStructure.objects.filter(pk=bed_fees.pk).exists()
    assert dict(PaymentRecord.objects.values_list("pk", "fee_structure_id")) == before
    assert set(before.values()) == {bed_fees.pk}


@pytest.mark.django_db
@pytest.mark.parametrize("operation", ["insert", "update", "delete"])
def test_payments_table_is_read_only(gateway, payments, operation):
    args = {
        "insert": ("payments", {"transaction_id": "TXN1"}),
        "update": ("payments", payments[0].pk, {"amount_paid": 1}),
        "delete": ("payments", payments[0].pk),
    }[operation]

    with pytest.raises(GatewayError):
        getattr(gateway, operation)(*args)

    assert PaymentRecord.objects.count() == len(payments)


def test_upload_stores_under_bucket_with_random_name(gateway):
    image = SimpleUploadedFile("Fee Chart.PNG", b"\x89PNG data", content_type="image/png")

    path = gateway.upload("fee-structures", image)

    assert path.startswith("fee-structures/")
    assert path.endswith(".png")
    assert "Fee Chart" not in path
    assert default_storage.exists(path)
    assert gateway.public_url(path)


def test_remove_ignores_missing_objects(gateway):
    path = gateway.upload("fee-structures", SimpleUploadedFile("a.jpg", b"x", content_type="image/jpeg"))

    assert gateway.remove(path) is True
    assert gateway.remove(path) is False
    assert gateway.remove("") is False
