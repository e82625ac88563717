"""Django project package for the push notification config store."""
