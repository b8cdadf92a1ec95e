"""
WSGI config for presenter project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'presenter.settings')

application = get_wsgi_application()
