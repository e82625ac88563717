"""Push notification configuration store backed by the Django ORM."""
