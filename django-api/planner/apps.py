from django.apps import AppConfig


class PlannerConfig(AppConfig):
    name = "planner"
    verbose_name = "Event Planner"

    def ready(self) -> None:
        from planner import signals  # noqa: F401

        self.reset_service()

    def reset_service(self) -> None:
        """Replace the process-wide service with one backed by empty stores."""
        from planner.services.planner_service import build_planner_service

        self.service = build_planner_service()
