"""Admin pages of the GiveWP to Brevo relay."""

from django import forms
from django.contrib import admin
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect
from django.template.response import TemplateResponse
from django.urls import path, reverse
from django.utils.translation import gettext_lazy as _

from givebrevo.activity_log import get_activity_log
from givebrevo.marketing import MarketingHandler
from givebrevo.models import BrevoConfiguration
from givebrevo.tools.text import sanitize_text_field


class BrevoConfigurationForm(forms.ModelForm):
    """Settings form, the list is chosen among the lists of the Brevo account."""

    list_id = forms.ChoiceField(label=_("Brevo List"), required=False)

    class Meta:  # noqa: D106
        model = BrevoConfiguration
        fields = ("api_key", "list_id")
        widgets = {"api_key": forms.TextInput(attrs={"class": "vTextField"})}

    def __init__(self, *args, **kwargs):
        """Populate the list choices from the stored API key."""
        super().__init__(*args, **kwargs)
        self.fields["list_id"].choices = self.get_list_choices()

    def get_list_choices(self):
        """Return the select options, starting with an empty one."""
        api_key = self.instance.api_key
        lists = MarketingHandler()(api_key).get_lists() if api_key else {}
        choices = [("", _("Select a List"))]
        choices += [(str(list_id), name) for list_id, name in lists.items()]

        # A list that can't be fetched anymore must not be lost on save
        stored = self.instance.list_id
        if stored and stored not in {value for value, _label in choices}:
            choices.append((stored, stored))
        return choices

    def clean_api_key(self):
        """Strip tags and extra whitespace from the key."""
        return sanitize_text_field(self.cleaned_data["api_key"])


@admin.register(BrevoConfiguration)
class BrevoConfigurationAdmin(admin.ModelAdmin):
    """Edit the Brevo credentials and browse the activity log."""

    form = BrevoConfigurationForm

    def has_add_permission(self, request):
        """Only one configuration can exist."""
        return super().has_add_permission(request) and not BrevoConfiguration.objects.exists()

    def has_delete_permission(self, request, obj=None):
        """The configuration is never deleted."""
        return False

    def get_urls(self):
        """Add the activity log page next to the configuration pages."""
        return [
            path(
                "logs/",
                self.admin_site.admin_view(self.activity_log_view),
                name="givebrevo_activity_log",
            ),
            *super().get_urls(),
        ]

    def changelist_view(self, request, extra_context=None):
        """Go straight to the single configuration."""
        configuration = BrevoConfiguration.load()
        if configuration is None:
            return redirect(reverse("admin:givebrevo_brevoconfiguration_add"))
        return redirect(reverse("admin:givebrevo_brevoconfiguration_change", args=[configuration.pk]))

    def activity_log_view(self, request):
        """Display the activity log as a table."""
        if not self.has_view_permission(request):
            raise PermissionDenied

        context = {
            **self.admin_site.each_context(request),
            "title": _("GiveWP to Brevo Logs"),
            "opts": self.model._meta,
            "entries": get_activity_log().entries(),
        }
        return TemplateResponse(request, "admin/givebrevo/activity_log.html", context)
