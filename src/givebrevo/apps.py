"""GiveWP to Brevo application."""

from django.apps import AppConfig


class GiveBrevoConfig(AppConfig):
    """Configuration class for the GiveWP to Brevo relay."""

    name = "givebrevo"
    verbose_name = "GiveWP Brevo"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        """Make sure the activity log exists once the app is loaded."""
        from givebrevo.activity_log import get_activity_log  # noqa: PLC0415

        get_activity_log().ensure_exists()
