from datetime import date
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.test import override_settings
from django_q.models import Schedule

from hireboard.common.api.tests.common import BaseTestCase
from hireboard.recruitment.api.v1.tests.factory import CandidateFactory
from hireboard.recruitment.utils.reminder import (
    send_interview_reminders, get_reminder_date, REMINDER_TASK
)
from hireboard.users.models import User

TOMORROW = '1403/05/10'


@patch('hireboard.recruitment.utils.reminder.get_reminder_date', return_value=TOMORROW)
@patch('hireboard.recruitment.utils.reminder.async_task')
class TestInterviewReminder(BaseTestCase):

    def setUp(self):
        self.interviewer = User.objects.create_user(
            'reza', 'Str0ng#Pass', name='Reza', email='reza@example.com'
        )

    def test_candidate_and_interviewer_are_reminded_once(self, async_task, _):
        candidate = CandidateFactory(
            interview_date=TOMORROW, interview_time='10:30', interviewer=self.interviewer
        )
        self.assertEqual(send_interview_reminders(), 1)
        self.assertEqual(async_task.call_count, 2)
        recipients = [call.args[4] for call in async_task.call_args_list]
        self.assertEqual(recipients, [[candidate.email], ['reza@example.com']])

        candidate.refresh_from_db()
        self.assertTrue(candidate.candidate_reminder_sent)
        self.assertTrue(candidate.interviewer_reminder_sent)

        async_task.reset_mock()
        self.assertEqual(send_interview_reminders(), 0)
        async_task.assert_not_called()

    def test_other_days_are_ignored(self, async_task, _):
        CandidateFactory(interview_date='1403/05/11', interview_time='10:30')
        CandidateFactory(interview_date=TOMORROW, interview_time='')
        self.assertEqual(send_interview_reminders(), 0)
        async_task.assert_not_called()

    def test_interviewer_without_email(self, async_task, _):
        self.interviewer.email = ''
        self.interviewer.save()
        candidate = CandidateFactory(
            interview_date=TOMORROW, interview_time='10:30', interviewer=self.interviewer
        )
        with self.assertLogs('hireboard.recruitment.utils.reminder', level='WARNING'):
            send_interview_reminders()
        self.assertEqual(async_task.call_count, 1)
        candidate.refresh_from_db()
        self.assertTrue(candidate.interviewer_reminder_sent)

    def test_rescheduled_interview_is_reminded_again(self, async_task, _):
        candidate = CandidateFactory(
            interview_date=TOMORROW, interview_time='10:30',
            candidate_reminder_sent=True
        )
        self.assertEqual(send_interview_reminders(), 0)

        candidate.candidate_reminder_sent = False
        candidate.save()
        self.assertEqual(send_interview_reminders(), 1)
        self.assertIn(TOMORROW, async_task.call_args.args[2])


class TestReminderSchedule(BaseTestCase):

    @override_settings(INTERVIEW_DATE_CALENDAR='gregorian')
    @patch('hireboard.recruitment.utils.reminder.get_tomorrow')
    def test_reminder_date(self, get_tomorrow):
        get_tomorrow.return_value = date(2024, 8, 1)
        self.assertEqual(get_reminder_date(), '2024/08/01')

    def test_schedule_command(self):
        out = StringIO()
        call_command('schedule_interview_reminders', minutes=15, stdout=out)
        schedule = Schedule.objects.get(func=REMINDER_TASK)
        self.assertEqual(schedule.minutes, 15)
        self.assertEqual(schedule.schedule_type, Schedule.MINUTES)

        call_command('schedule_interview_reminders', stdout=out)
        self.assertEqual(Schedule.objects.filter(func=REMINDER_TASK).count(), 1)
        self.assertIn('already exists and was ignored', out.getvalue())
