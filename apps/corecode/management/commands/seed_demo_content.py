from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.content.fallback import (
    CULTURAL_PROGRAMS_FALLBACK,
    GALLERY_FALLBACK,
    NEWS_FALLBACK,
    PROGRAMS_FALLBACK,
)
from apps.corecode.gateway import GatewayError, get_gateway
from apps.finance.fallback import FEE_STRUCTURES_FALLBACK, PAYMENTS_FALLBACK
from apps.finance.models import PaymentRecord

# (table, records, natural key)
SEED_TABLES = [
    ("news", NEWS_FALLBACK, "title"),
    ("gallery", GALLERY_FALLBACK, "title"),
    ("programs", PROGRAMS_FALLBACK, "name"),
    ("cultural_programs", CULTURAL_PROGRAMS_FALLBACK, "name"),
    ("fees", FEE_STRUCTURES_FALLBACK, "program_name"),
]

SKIPPED_KEYS = {"id", "created_at", "total_fee"}


class Command(BaseCommand):
    help = 'Insert the built-in demo records as real rows; existing rows are left alone'

    def add_arguments(self, parser):
        parser.add_argument(
            '--skip-payments',
            action='store_true',
            help='Do not create the demo payment history'
        )

    def handle(self, *args, **options):
        gateway = get_gateway()
        fee_ids = {}

        for table, records, key in SEED_TABLES:
            try:
                existing = {getattr(row, key): row for row in gateway.select(table, order_by=None)}
            except GatewayError as e:
                raise CommandError(f"Cannot read {table}: {e}")

            created = 0
            for record in records:
                row = existing.get(record[key])
                if row is None:
                    values = {k: v for k, v in record.items() if k not in SKIPPED_KEYS}
                    try:
                        row = gateway.insert(table, values)
                    except (GatewayError, ValidationError) as e:
                        raise CommandError(f"Cannot seed {table} '{record[key]}': {e}")
                    created += 1
                if table == "fees":
                    fee_ids[record["id"]] = row.pk

            self.stdout.write(f"{table}: {created} created, {len(records) - created} already present")

        if options['skip_payments']:
            return

        created = 0
        for record in PAYMENTS_FALLBACK:
            values = {k: v for k, v in record.items() if k not in SKIPPED_KEYS}
            values["fee_structure_id"] = fee_ids.get(record["fee_structure_id"])
            transaction_id = values.pop("transaction_id")
            _, was_created = PaymentRecord.objects.get_or_create(
                transaction_id=transaction_id, defaults=values
            )
            created += int(was_created)

        self.stdout.write(f"payments: {created} created, {len(PAYMENTS_FALLBACK) - created} already present")
        self.stdout.write(self.style.SUCCESS("Demo content seeded"))
