"""WSGI config for the NextIntern project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'nextintern.settings')

application = get_wsgi_application()
