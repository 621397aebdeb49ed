"""@hireboard_docs"""
import logging

from django.utils import timezone
from rest_framework.exceptions import ValidationError

from hireboard.recruitment.constants import (
    EMAIL, PENDING, MESSAGE_SENT, TESTS_SENT
)
from hireboard.recruitment.models import RecruitmentSetting, Template, TestResult
from hireboard.recruitment.utils.dispatch import dispatch, get_default_subject
from hireboard.recruitment.utils.template import render_template_message, build_context

logger = logging.getLogger(__name__)


def get_template(template_id):
    if not template_id:
        return None
    template = Template.objects.filter(id=template_id).first()
    if not template:
        raise ValidationError({'template': f'Template "{template_id}" does not exist.'})
    return template


def communicate(candidates, channel, template=None, message=None, subject=None, user=None):
    """
    Prepare one message per candidate on `channel`.

    The text is the given message, or the template content when no message is
    given, rendered for each candidate. A candidate the channel fails for is
    reported in its result and does not stop the others.

    :return: list of results, one per candidate
    """
    text = message if (message or '').strip() else (template.content if template else '')
    if not text.strip():
        raise ValidationError({'message': ['Message may not be blank.']})

    setting = RecruitmentSetting.get_solo()
    subject = subject or get_default_subject(setting.company_name)
    results = []
    for candidate in candidates:
        body = render_template_message(
            text, candidate, build_context(setting, stage=candidate.stage)
        )
        destination = candidate.email if channel == EMAIL else candidate.phone
        result = dispatch(channel, destination, body, subject=subject).as_dict()
        result['candidate'] = str(candidate.id)
        result['message'] = body
        if result['success']:
            candidate.add_history(
                MESSAGE_SENT.format(channel=channel),
                details=template.name if template else '',
                user=user
            )
        results.append(result)

    logger.info(
        f"Prepared {len([r for r in results if r['success']])} of {len(results)} "
        f"{channel} messages."
    )
    return results


def build_tests_message(candidate, tests, deadline_hours=None, company_name=''):
    lines = [f"Hello {candidate.name},", "Please take the following tests:", ""]
    for test in tests:
        lines.append(f"- {test['name']}:")
        lines.append(test['url'])
        lines.append("")
    if deadline_hours:
        lines.append(f"You have {deadline_hours} hours to complete these tests.")
    if candidate.portal_url:
        lines.append(f"Submit your results on your application page: {candidate.portal_url}")
    lines.extend(["", "Best regards,", company_name])
    return "\n".join(lines)


def send_tests(candidate, test_ids, channel=EMAIL, deadline_hours=None, user=None):
    """
    Invite the candidate to the tests of the library with `test_ids`.

    Results are only marked pending once the compose link could be built.

    :return: (dispatch result dict, list of TestResult)
    """
    setting = RecruitmentSetting.get_solo()
    tests = [setting.get_test(test_id) for test_id in test_ids]
    if not all(tests):
        raise ValidationError({'tests': ['Unknown test.']})

    message = build_tests_message(candidate, tests, deadline_hours, setting.company_name)
    destination = candidate.email if channel == EMAIL else candidate.phone
    result = dispatch(
        channel, destination, message,
        subject=f"Recruitment tests - {setting.company_name}"
    )
    if not result.success:
        raise ValidationError({'channel': [result.error]})

    sent_date = timezone.now()
    test_results = []
    for test in tests:
        test_result, _ = TestResult.objects.update_or_create(
            candidate=candidate,
            test_id=test['id'],
            defaults={
                'status': PENDING,
                'sent_date': sent_date,
                'deadline_hours': deadline_hours,
            }
        )
        test_results.append(test_result)
    candidate.add_history(
        TESTS_SENT, details=', '.join(test['name'] for test in tests), user=user
    )
    logger.info(f"{len(tests)} tests sent to candidate {candidate.id}.")
    return result.as_dict(), test_results
