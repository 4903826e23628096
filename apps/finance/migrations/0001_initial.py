import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FeeStructure",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("program_name", models.CharField(max_length=200, verbose_name="Program Name")),
                ("academic_year", models.CharField(default="2024-25", max_length=20, verbose_name="Academic Year")),
                ("tuition_fee", models.PositiveIntegerField(default=0, verbose_name="Tuition Fee")),
                ("admission_fee", models.PositiveIntegerField(default=0, verbose_name="Admission Fee")),
                ("examination_fee", models.PositiveIntegerField(default=0, verbose_name="Examination Fee")),
                ("library_fee", models.PositiveIntegerField(default=0, verbose_name="Library Fee")),
                ("laboratory_fee", models.PositiveIntegerField(default=0, verbose_name="Laboratory Fee")),
                ("other_fees", models.PositiveIntegerField(default=0, verbose_name="Other Fees")),
                ("total_fee", models.PositiveIntegerField(default=0, editable=False, verbose_name="Total Fee")),
                ("due_date", models.DateField(verbose_name="Due Date")),
                ("fee_structure_image", models.CharField(
                    blank=True,
                    help_text="Storage path or absolute URL of the published fee chart",
                    max_length=500,
                    verbose_name="Fee Structure Image",
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Fee Structure",
                "verbose_name_plural": "Fee Structures",
                "db_table": "fees",
                "ordering": ["-academic_year", "program_name"],
            },
        ),
        migrations.CreateModel(
            name="PaymentRecord",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("student_id", models.CharField(db_index=True, max_length=50, verbose_name="Student ID")),
                ("amount_paid", models.PositiveIntegerField(verbose_name="Amount Paid")),
                ("payment_date", models.DateField(verbose_name="Payment Date")),
                ("payment_method", models.CharField(max_length=50, verbose_name="Payment Method")),
                ("transaction_id", models.CharField(max_length=100, unique=True, verbose_name="Transaction ID")),
                ("status", models.CharField(
                    choices=[
                        ("completed", "Completed"),
                        ("pending", "Pending"),
                        ("failed", "Failed"),
                    ],
                    default="pending",
                    max_length=20,
                    verbose_name="Status",
                )),
                ("installment_number", models.PositiveSmallIntegerField(default=1, verbose_name="Installment")),
                ("due_date", models.DateField(blank=True, null=True, verbose_name="Due Date")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("fee_structure", models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name="payments",
                    to="finance.feestructure",
                    verbose_name="Fee Structure",
                )),
            ],
            options={
                "verbose_name": "Payment Record",
                "verbose_name_plural": "Payment Records",
                "db_table": "payments",
                "ordering": ["-payment_date"],
            },
        ),
    ]
