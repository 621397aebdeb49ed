from django.apps import AppConfig


class RecruitmentConfig(AppConfig):
    name = 'hireboard.recruitment'

    def ready(self):
        from . import signals  # noqa
