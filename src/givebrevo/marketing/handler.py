"""Marketing backend handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from givebrevo import conf
from givebrevo.marketing.exceptions import MarketingInvalidBackendError


class MarketingHandler:
    """Marketing handler managing the backend instantiation."""

    def __init__(self, backend=None):
        """Initialize the marketing handler."""
        # backend is an optional dict of marketing backend definitions
        # (structured like settings.GIVEBREVO_MARKETING).
        self._backend = backend

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is None:
            try:
                self._backend = getattr(settings, "GIVEBREVO_MARKETING", conf.DEFAULT_MARKETING).copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.GIVEBREVO_MARKETING is not configured") from e
        return self._backend

    def __call__(self, api_key):
        """Return a backend bound to the given API key."""
        return self.create_marketing(self.backend, api_key)

    def create_marketing(self, params, api_key):
        """Instantiate and configure the marketing backend."""
        params = params.copy()
        backend = params.pop("BACKEND")
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise MarketingInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(api_key=api_key, **parameters)
