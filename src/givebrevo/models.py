"""Models of the GiveWP to Brevo relay."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class BrevoConfiguration(models.Model):
    """
    Brevo credentials used to relay donations.

    Only one row is expected, it is always stored with the primary key 1.
    """

    SINGLETON_PK = 1

    api_key = models.CharField(_("Brevo API Key"), max_length=255, blank=True)
    list_id = models.CharField(_("Brevo List"), max_length=32, blank=True)

    class Meta:
        verbose_name = _("Brevo configuration")
        verbose_name_plural = _("Brevo configuration")

    def __str__(self):
        """Return a string representation of the configuration."""
        return str(_("Brevo configuration"))

    def save(self, *args, **kwargs):
        """Always save the configuration on the singleton row."""
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Return the stored configuration, or None when nothing was saved yet."""
        return cls.objects.filter(pk=cls.SINGLETON_PK).first()
