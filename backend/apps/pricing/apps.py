from django.apps import AppConfig


class PricingConfig(AppConfig):
    name = 'apps.pricing'

    def ready(self):
        # Fail at startup on a bad PRICING block rather than on first request.
        from .container import build_pricing_config

        build_pricing_config()
