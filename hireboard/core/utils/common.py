"""@hireboard_docs"""
import os
import uuid

from django.utils import timezone


class DummyObject:
    """A dummy object with attributes passed in __init__"""

    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


def get_uuid_filename(filename):
    """
    rename the file name to uuid4 and return the
    path
    """
    ext = filename.split('.')[-1]
    return "{}.{}".format(uuid.uuid4().hex, ext)


def get_upload_path(instance, filename):
    return os.path.join(f"uploads/{instance.__class__.__name__.lower()}",
                        get_uuid_filename(filename))


def get_today(with_time=False):
    """
    Returns today's date.

    Setting `with_time` to True returns a datetime.datetime object.
    Setting `with_time` to False returns a datetime.date object.
    """
    return timezone.now().astimezone() if with_time else timezone.now().astimezone().date()


def get_tomorrow(with_time=False):
    return get_today(with_time) + timezone.timedelta(days=1)
