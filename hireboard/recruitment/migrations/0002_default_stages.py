from django.db import migrations

from hireboard.recruitment.constants import DEFAULT_STAGES


def create_default_stages(apps, schema_editor):
    Stage = apps.get_model('recruitment', 'Stage')
    for order, (slug, title, is_core) in enumerate(DEFAULT_STAGES):
        Stage.objects.get_or_create(
            slug=slug,
            defaults={'title': title, 'is_core': is_core, 'order': order}
        )


def remove_default_stages(apps, schema_editor):
    Stage = apps.get_model('recruitment', 'Stage')
    Stage.objects.filter(
        slug__in=[slug for slug, _, _ in DEFAULT_STAGES],
        candidates__isnull=True
    ).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('recruitment', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_default_stages, remove_default_stages),
    ]
