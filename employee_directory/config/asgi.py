"""
ASGI config for the employee directory project.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "employee_directory.config.settings.production")

application = get_asgi_application()
