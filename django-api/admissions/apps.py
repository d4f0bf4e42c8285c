from django.apps import AppConfig


class AdmissionsConfig(AppConfig):
    """Configuration for the admissions app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "admissions"
