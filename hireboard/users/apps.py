from django.apps import AppConfig


class UsersConfig(AppConfig):
    name = 'hireboard.users'
