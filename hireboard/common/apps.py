from django.apps import AppConfig


class CommonConfig(AppConfig):
    name = 'hireboard.common'
