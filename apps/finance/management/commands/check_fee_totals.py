from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.corecode.gateway import GatewayError, get_gateway
from apps.corecode.utils import format_inr


class Command(BaseCommand):
    help = 'Report fee structures whose stored total differs from the sum of their fee items'

    def add_arguments(self, parser):
        parser.add_argument(
            '--fix',
            action='store_true',
            help='Rewrite mismatched totals through the data gateway'
        )

    def handle(self, *args, **options):
        gateway = get_gateway()
        try:
            fee_structures = gateway.select("fees", order_by="pk")
        except GatewayError as e:
            raise CommandError(f"Cannot read fee structures: {e}")

        mismatched = [fee for fee in fee_structures if fee.total_fee != fee.compute_total_fee()]

        if not mismatched:
            self.stdout.write(self.style.SUCCESS(f"All {len(fee_structures)} fee totals are consistent"))
            return

        for fee in mismatched:
            self.stdout.write(
                f"#{fee.pk} {fee}: stored {format_inr(fee.total_fee)}, "
                f"items sum to {format_inr(fee.compute_total_fee())}"
            )

        if not options['fix']:
            self.stdout.write(self.style.WARNING(f"{len(mismatched)} mismatched total(s); run with --fix to repair"))
            return

        for fee in mismatched:
            try:
                # An empty write makes the gateway recompute the derived total
                gateway.update("fees", fee.pk, {})
            except (GatewayError, ValidationError) as e:
                raise CommandError(f"Cannot repair #{fee.pk}: {e}")

        self.stdout.write(self.style.SUCCESS(f"Repaired {len(mismatched)} fee total(s)"))
