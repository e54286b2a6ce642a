from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

User = get_user_model()


class Command(BaseCommand):
    help = "Create the site super-admin, or reset its password if it already exists"

    def add_arguments(self, parser):
        parser.add_argument("--email", default=None, help="Defaults to ADMIN_EMAIL")
        parser.add_argument("--password", default=None, help="Defaults to ADMIN_PASSWORD")
        parser.add_argument("--name", default="CyberPiT Admin")

    def handle(self, *args, **opts):
        email = (opts["email"] or settings.ADMIN_EMAIL).strip().lower()
        password = opts["password"] or settings.ADMIN_PASSWORD
        first_name, _, last_name = opts["name"].partition(" ")

        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            User.objects.create_superuser(
                username=email, email=email, password=password, first_name=first_name, last_name=last_name
            )
            self.stdout.write(self.style.SUCCESS(f"Admin user created: {email}"))
            return

        user.set_password(password)
        user.is_active = True
        user.is_staff = True
        user.is_superuser = True
        user.save()
        self.stdout.write(self.style.WARNING(f"Admin user already existed, credentials updated: {email}"))
