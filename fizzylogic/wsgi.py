# fizzylogic/wsgi.py
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "fizzylogic.settings")

application = get_wsgi_application()

# Runs before the server starts accepting requests; failures abort startup
from fizzylogic.startup import ensure_superuser  # noqa: E402

ensure_superuser()
