import datetime

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.cache import cache

from apps.corecode.gateway import reset_gateway

PASSWORD = "s3cret-pass!"


@pytest.fixture(autouse=True)
def site_settings(settings):
    settings.TASKS_RUN_INLINE = True
    settings.ADMIN_ACCESS_POLICY = "authenticated"
    settings.ADMINS = []
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }
    cache.clear()
    reset_gateway()
    yield settings
    reset_gateway()


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def editor(db):
    """A signed-in-capable account with no special flags"""
    return get_user_model().objects.create_user(
        username="editor@jptt.edu", email="editor@jptt.edu", password=PASSWORD
    )


@pytest.fixture
def site_admin(db, settings):
    user = get_user_model().objects.create_user(
        username="admin@jptt.edu", email="admin@jptt.edu", password=PASSWORD, is_staff=True
    )
    group, _ = Group.objects.get_or_create(name=settings.ADMIN_ROLE_GROUP)
    user.groups.add(group)
    return user


@pytest.fixture
def editor_client(client, editor):
    client.force_login(editor)
    return client


@pytest.fixture
def bed_fees(db):
    from apps.finance.models import FeeStructure

    return FeeStructure.objects.create(
        program_name="Bachelor of Education (B.Ed)",
        academic_year="2024-25",
        tuition_fee=35000,
        admission_fee=5000,
        examination_fee=3000,
        library_fee=1000,
        laboratory_fee=1000,
        other_fees=0,
        due_date=datetime.date(2024, 7, 15),
    )


@pytest.fixture
def payments(db, bed_fees, settings):
    from apps.finance.models import PaymentRecord

    student_id = settings.STUDENT_PROFILE["student_id"]
    rows = [
        ("TXN00123456", 15000, datetime.date(2024, 6, 15), "Online Transfer", "completed", 1),
        ("TXN00123457", 15000, datetime.date(2024, 7, 10), "Credit Card", "completed", 2),
        ("TXN00123458", 5000, datetime.date(2024, 8, 1), "UPI", "pending", 3),
    ]
    return [
        PaymentRecord.objects.create(
            student_id=student_id,
            fee_structure=bed_fees,
            transaction_id=txn,
            amount_paid=amount,
            payment_date=paid_on,
            payment_method=method,
            status=status,
            installment_number=installment,
        )
        for txn, amount, paid_on, method, status, installment in rows
    ]
