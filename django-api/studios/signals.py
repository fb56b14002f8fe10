"""Django signals for rebuilding the cached booking service."""

from django.core.signals import setting_changed
from django.dispatch import receiver

from studios.conf import get_booking_service


@receiver(setting_changed)
def invalidate_booking_service(sender, setting, **kwargs):
    """Drop the cached service when the engine settings change."""
    if setting == "STUDIO_ENGINE":
        get_booking_service.cache_clear()
