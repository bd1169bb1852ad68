# user/management/commands/ensure_superuser.py
from django.core.management.base import BaseCommand

from fizzylogic.startup import ensure_superuser


class Command(BaseCommand):
    help = 'Create the initial administrative user from INITIAL_USER_* settings'

    def handle(self, *args, **kwargs):
        user = ensure_superuser()

        if user is None:
            self.stdout.write('Nothing to do: initial user exists or is not configured')
        else:
            self.stdout.write(self.style.SUCCESS(f'Created superuser {user.username}'))
