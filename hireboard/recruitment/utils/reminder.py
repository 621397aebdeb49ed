"""@hireboard_docs"""
import logging

from django.conf import settings
from django.core.mail import send_mail
from django.db.models import Q
from django_q.models import Schedule
from django_q.tasks import async_task

from hireboard.core.utils import jalali
from hireboard.core.utils.common import get_tomorrow
from hireboard.recruitment.models import Candidate, RecruitmentSetting

logger = logging.getLogger(__name__)

REMINDER_TASK = 'hireboard.recruitment.utils.reminder.send_interview_reminders'
REMINDER_SCHEDULE_NAME = 'Interview Reminder'


def get_reminder_date():
    """Interview date, as stored on candidates, of tomorrow's interviews."""
    return jalali.date_to_string(get_tomorrow(), settings.INTERVIEW_DATE_CALENDAR)


def _candidate_message(candidate, company_name):
    return (
        f"Hello {candidate.name},\n\n"
        f"This is a reminder that your interview for the \"{candidate.position}\" "
        f"position at {company_name} is on {candidate.interview_date} at "
        f"{candidate.interview_time}.\n\nBest regards,\n{company_name}"
    )


def _interviewer_message(candidate):
    return (
        f"Hello {candidate.interviewer.full_name},\n\n"
        f"You are interviewing {candidate.name} for the \"{candidate.position}\" "
        f"position on {candidate.interview_date} at {candidate.interview_time}."
    )


def send_interview_reminders():
    """
    Task for sending reminders of tomorrow's interviews.

    The candidate is reminded once, and so is the interviewer when one is
    set. An interviewer without an email is marked as reminded so the
    candidate is not picked again on the next run.

    :return: number of candidates processed
    """
    interview_date = get_reminder_date()
    candidates = Candidate.objects.filter(
        interview_date=interview_date
    ).exclude(interview_time='').filter(
        Q(candidate_reminder_sent=False) |
        Q(interviewer_reminder_sent=False, interviewer__isnull=False)
    ).select_related('interviewer')

    if not candidates:
        logger.debug(f"No interviews on {interview_date} to send reminders for.")
        return 0

    company_name = RecruitmentSetting.get_solo().company_name or settings.SYSTEM_NAME
    subject = f"Interview reminder - {company_name}"
    count = 0
    for candidate in candidates:
        if not candidate.candidate_reminder_sent:
            try:
                async_task(
                    send_mail, subject, _candidate_message(candidate, company_name),
                    settings.DEFAULT_FROM_EMAIL, [candidate.email]
                )
                candidate.candidate_reminder_sent = True
                logger.info(f"Sent interview reminder to candidate {candidate.id}.")
            except Exception as e:
                logger.exception(str(e))

        interviewer = candidate.interviewer
        if interviewer and not candidate.interviewer_reminder_sent:
            if interviewer.email:
                try:
                    async_task(
                        send_mail, subject, _interviewer_message(candidate),
                        settings.DEFAULT_FROM_EMAIL, [interviewer.email]
                    )
                    candidate.interviewer_reminder_sent = True
                    logger.info(
                        f"Sent interview reminder to {interviewer.username} "
                        f"for candidate {candidate.id}."
                    )
                except Exception as e:
                    logger.exception(str(e))
            else:
                logger.warning(
                    f"Could not remind {interviewer.username} about candidate "
                    f"{candidate.id}, interviewer has no email."
                )
                candidate.interviewer_reminder_sent = True

        candidate.save(update_fields=[
            'candidate_reminder_sent', 'interviewer_reminder_sent'
        ])
        count += 1
    return count


def schedule_interview_reminders(minutes=None):
    """
    Create the periodic schedule of `send_interview_reminders`.

    :return: (schedule, created)
    """
    return Schedule.objects.get_or_create(
        func=REMINDER_TASK,
        defaults={
            'name': REMINDER_SCHEDULE_NAME,
            'schedule_type': Schedule.MINUTES,
            'minutes': minutes or settings.INTERVIEW_REMINDER_INTERVAL_MINUTES,
        }
    )
