"""@hireboard_docs"""
import re

from django.conf import settings
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from hireboard.core.utils import jalali

TEXT_FIELD_MAX_LENGTH = settings.TEXT_FIELD_MAX_LENGTH


def validate_title(value):
    """
    Accept any title that is not blank once surrounding spaces are removed.
    """
    if value and value.strip():
        return value
    raise ValidationError(_("This field may not be blank."))


def validate_description(value):
    """
        :raise ValidationError if length is greater than config.settings.TEXT_FIELD_MAX_LENGTH
    """
    if len(value) > TEXT_FIELD_MAX_LENGTH:
        raise ValidationError(
            _(f"Ensure this field has no more than {TEXT_FIELD_MAX_LENGTH} characters.")
        )
    return value


def validate_phone_number(phone_number):
    number_regex = re.compile(r'^[+\d\(\)\-\s]+$')
    if not number_regex.fullmatch(phone_number):
        raise ValidationError("The Phone number format is not valid. "
                              "There can be numbers, hyphens and braces.")
    return phone_number


def validate_interview_date(value):
    calendar = settings.INTERVIEW_DATE_CALENDAR
    if jalali.is_valid(value, calendar=calendar):
        return value
    raise ValidationError(
        _(f"Enter a valid {calendar} date in YYYY/MM/DD format.")
    )


def validate_interview_time(value):
    time_regex = re.compile(r'([01]\d|2[0-3]):[0-5]\d')
    if time_regex.fullmatch(value):
        return value
    raise ValidationError(_("Enter a valid time in HH:MM format."))


def validate_result_url(value):
    if value.startswith('http'):
        return value
    raise ValidationError(_("Link must start with http."))


def validate_file_size(file):
    if file and file.size > settings.MAX_FILE_SIZE * 1024 * 1024:
        raise ValidationError(
            _(f"File size must be less than or equal to {settings.MAX_FILE_SIZE} MB.")
        )
    return file
