"""
Create or update the admin account from ADMIN_EMAIL / ADMIN_PASSWORD.
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.auth.passwords import hash_password
from apps.users.models import User, UserRole


class Command(BaseCommand):
    help = "Create or update the admin user from environment configuration"

    def handle(self, *args, **options):
        email = settings.ADMIN_EMAIL.lower().strip()
        password = settings.ADMIN_PASSWORD
        if not email or not password:
            raise CommandError("ADMIN_EMAIL and ADMIN_PASSWORD must be set")

        user, created = User.objects.update_or_create(
            email=email,
            defaults={
                "name": settings.ADMIN_NAME,
                "role": UserRole.ADMIN,
                "is_active": True,
                "password": hash_password(password),
            },
        )

        action = "Created" if created else "Updated"
        self.stdout.write(self.style.SUCCESS(f"{action} admin user {user.email}"))
