from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.db import models
from django.utils.translation import gettext_lazy as _

from .managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    Recruiter account. `is_admin` users manage settings, templates and other
    users; everybody else works the board.
    """
    username = models.CharField(
        _('user username'), max_length=150, unique=True
    )
    name = models.CharField(_('Name'), max_length=150)
    # several users may have no email, so blank emails are stored as NULL
    email = models.EmailField(
        _('user email'), max_length=255, unique=True, null=True, blank=True
    )
    is_admin = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    # board background chosen by the user, an url or a css color
    kanban_background = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['name']

    class Meta:
        ordering = ('name',)

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return self.name or self.username

    @property
    def is_staff(self):
        return self.is_admin

    def save(self, *args, **kwargs):
        if not self.email:
            self.email = None
        super().save(*args, **kwargs)
