"""@hireboard_docs"""
import re

from hireboard.recruitment.constants import (
    CANDIDATE_NAME, POSITION, INTERVIEW_DATE, INTERVIEW_TIME, COMPANY_NAME,
    COMPANY_ADDRESS, COMPANY_WEBSITE, STAGE_NAME, INTERVIEW_DATE_NOT_SET,
    INTERVIEW_TIME_NOT_SET
)

PLACEHOLDER_REGEX = re.compile(r'{{(\w+)}}')


def _get_replacements(candidate, extra=None):
    replacements = {
        CANDIDATE_NAME: getattr(candidate, 'name', ''),
        POSITION: getattr(candidate, 'position', ''),
        INTERVIEW_DATE: getattr(candidate, 'interview_date', '') or INTERVIEW_DATE_NOT_SET,
        INTERVIEW_TIME: getattr(candidate, 'interview_time', '') or INTERVIEW_TIME_NOT_SET,
    }
    replacements.update({
        key: value for key, value in (extra or {}).items() if value is not None
    })
    return replacements


def render_template_message(content, candidate, extra=None):
    """
    Replace every `{{key}}` of content in a single pass.

    Lookup is made of the candidate fields candidateName, position,
    interviewDate and interviewTime, overridden by `extra`. `None` values of
    extra are ignored. Unknown keys and keys resolving to an empty value are
    left untouched so a missing value stays visible in the message.

    :param content: template content
    :param candidate: object with name, position, interview_date and interview_time
    :param extra: dict of additional replacements
    :return: rendered message
    """
    if not content:
        return content or ''
    replacements = _get_replacements(candidate, extra)

    def replace(match):
        value = replacements.get(match.group(1))
        return str(value) if value else match.group(0)

    return PLACEHOLDER_REGEX.sub(replace, content)


def has_placeholder(content, name):
    if not content:
        return False
    return '{{%s}}' % name in content


def build_context(setting, stage=None, **extra):
    """
    Standard extra replacements, the company profile and the stage title.
    """
    profile = setting.company_profile if setting else {}
    context = {
        COMPANY_NAME: profile.get('name'),
        COMPANY_ADDRESS: profile.get('address'),
        COMPANY_WEBSITE: profile.get('website'),
        STAGE_NAME: stage.title if stage else None,
    }
    context.update(extra)
    return context
