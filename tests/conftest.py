"""Pytest configuration and shared fixtures."""

import os

import django

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "push_config_service.settings_test")
django.setup()
