"""@hireboard_docs"""
import logging
import re
from urllib.parse import quote

from django.conf import settings

from hireboard.recruitment.constants import EMAIL, WHATSAPP

logger = logging.getLogger(__name__)

EMAIL_REGEX = re.compile(r'[^@\s]+@[^@\s]+\.[^@\s]+')


class DispatchResult:
    """
    Outcome of preparing one message for one channel. `url` is the compose
    link the recruiter opens; nothing is delivered by the server.
    """

    def __init__(self, channel, success, url=None, error=None):
        self.channel = channel
        self.success = success
        self.url = url
        self.error = error

    def __repr__(self):
        return f"<DispatchResult {self.channel} success={self.success}>"

    def as_dict(self):
        return {
            'channel': self.channel,
            'success': self.success,
            'url': self.url,
            'error': self.error,
        }


def get_default_subject(company_name=None):
    return f"Message from {company_name or settings.SYSTEM_NAME}"


def normalize_whatsapp_number(phone):
    """
    Keep digits only and replace a leading 0 with the country code.
    """
    number = re.sub(r'[^0-9]', '', phone or '')
    if number.startswith('0'):
        number = settings.WHATSAPP_COUNTRY_CODE + number[1:]
    return number


def build_mailto(email, subject, body):
    return f"mailto:{email}?subject={quote(subject or '', safe='')}&body={quote(body or '', safe='')}"


def build_whatsapp_link(number, message):
    return f"https://wa.me/{number}?text={quote(message or '', safe='')}"


def dispatch(channel, destination, message, subject=None):
    """
    Build the compose link of `message` for `destination` on `channel`.

    Failures are returned, never raised, so one failing channel does not
    stop the others.

    :param channel: email or whatsapp
    :param destination: email address or phone number
    :param message: rendered message body
    :param subject: email subject, defaults to "Message from <system name>"
    :return: DispatchResult
    """
    destination = (destination or '').strip()
    if channel == EMAIL:
        if not destination or not EMAIL_REGEX.fullmatch(destination):
            logger.warning(f"Email message not prepared, invalid address '{destination}'.")
            return DispatchResult(
                channel, False, error='Candidate has no valid email address.'
            )
        return DispatchResult(
            channel, True,
            url=build_mailto(destination, subject or get_default_subject(), message)
        )

    if channel == WHATSAPP:
        number = normalize_whatsapp_number(destination)
        if not number:
            logger.warning(f"WhatsApp message not prepared, invalid phone '{destination}'.")
            return DispatchResult(
                channel, False,
                error='Candidate has no valid phone number for WhatsApp.'
            )
        return DispatchResult(channel, True, url=build_whatsapp_link(number, message))

    return DispatchResult(channel, False, error=f'Unknown channel "{channel}".')
