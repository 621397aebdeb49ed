from django.core.management import BaseCommand

from hireboard.recruitment.utils.reminder import schedule_interview_reminders


class Command(BaseCommand):
    help = "Schedule the periodic interview reminder task"

    def add_arguments(self, parser):
        parser.add_argument(
            '--minutes',
            type=int,
            help='Interval between two reminder checks',
        )

    def handle(self, *args, **options):
        schedule, created = schedule_interview_reminders(options.get('minutes'))
        if not created:
            self.stdout.write(self.style.ERROR(
                f"{schedule.name} already exists and was ignored"
            ))
            return
        self.stdout.write(self.style.SUCCESS(
            f"Created {schedule.name} running every {schedule.minutes} minutes"
        ))
