from django.core.management import BaseCommand
from django.db import transaction

from hireboard.recruitment.constants import DEFAULT_STAGES, DEFAULT_TEMPLATES
from hireboard.recruitment.models import RecruitmentSetting, Stage, Template


class Command(BaseCommand):
    help = "Initial data for the recruitment board, settings and message templates"

    @transaction.atomic
    def handle(self, *args, **options):
        for order, (slug, title, is_core) in enumerate(DEFAULT_STAGES):
            _, created = Stage.objects.get_or_create(
                slug=slug,
                defaults={'title': title, 'is_core': is_core, 'order': order}
            )
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created stage {title}"))

        setting = RecruitmentSetting.get_solo()
        self.stdout.write(
            self.style.SUCCESS(f"Using settings of {setting.company_name}")
        )

        for name, template_type, stage, content in DEFAULT_TEMPLATES:
            if stage and not Stage.objects.filter(slug=stage).exists():
                stage = None
            _, created = Template.objects.get_or_create(
                name=name,
                type=template_type,
                defaults={'stage_id': stage, 'content': content}
            )
            if created:
                self.stdout.write(self.style.SUCCESS(f"Created template {name}"))
            else:
                self.stdout.write(self.style.ERROR(
                    f"{name} already exists and was ignored"
                ))
