import os

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction


class Command(BaseCommand):
    help = 'Create the site administrator account, or report that it already exists'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            default=None,
            help='Administrator e-mail (defaults to SITE_ADMIN_EMAIL)'
        )
        parser.add_argument(
            '--password',
            default=None,
            help='Password for a new account (defaults to $SITE_ADMIN_PASSWORD)'
        )

    def handle(self, *args, **options):
        email = (options['email'] or settings.SITE_ADMIN_EMAIL).strip().lower()
        password = options['password'] or os.environ.get('SITE_ADMIN_PASSWORD')
        User = get_user_model()

        with transaction.atomic():
            group, _ = Group.objects.get_or_create(name=settings.ADMIN_ROLE_GROUP)
            user = User.objects.filter(email__iexact=email).first()

            if user is None:
                if not password:
                    raise CommandError(
                        'A password is required to create the admin account '
                        '(--password or SITE_ADMIN_PASSWORD)'
                    )
                user = User.objects.create_user(
                    username=email,
                    email=email,
                    password=password,
                    is_staff=True,
                )
                created = True
            else:
                if not user.is_staff:
                    user.is_staff = True
                    user.save(update_fields=['is_staff'])
                created = False

            user.groups.add(group)

        if created:
            self.stdout.write(self.style.SUCCESS(f'Admin user created: {email}'))
        else:
            self.stdout.write(self.style.WARNING(f'Admin user already exists: {email}'))
