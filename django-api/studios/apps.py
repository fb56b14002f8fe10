from django.apps import AppConfig


class StudiosConfig(AppConfig):
    name = "studios"
    verbose_name = "Studio bookings"

    def ready(self):
        from studios import signals  # noqa: F401
