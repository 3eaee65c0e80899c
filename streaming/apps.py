from django.apps import AppConfig


class StreamingConfig(AppConfig):
    name = "streaming"
    verbose_name = "Streaming catalog"

    def ready(self) -> None:
        from streaming import signals  # noqa: F401
