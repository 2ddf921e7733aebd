"""
Django project configuration for the employee directory service.

Settings live in the ``settings`` package and are selected through
``DJANGO_SETTINGS_MODULE``.
"""
