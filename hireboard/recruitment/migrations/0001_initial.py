import uuid

import cuser.fields
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import hireboard.core.utils.common
import hireboard.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Stage',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('slug', models.SlugField(max_length=100, unique=True)),
                ('title', models.CharField(max_length=255, validators=[hireboard.core.validators.validate_title])),
                ('is_core', models.BooleanField(default=False)),
                ('order', models.PositiveSmallIntegerField(db_index=True, default=0)),
                ('created_by', cuser.fields.CurrentUserField(add_only=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_stage_created', to=settings.AUTH_USER_MODEL)),
                ('modified_by', cuser.fields.CurrentUserField(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_stage_modified', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('order', 'id'),
            },
        ),
        migrations.CreateModel(
            name='RecruitmentSetting',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('sources', models.JSONField(blank=True, default=list)),
                ('company_profile', models.JSONField(blank=True, default=dict)),
                ('test_library', models.JSONField(blank=True, default=list)),
            ],
            options={
                'ordering': ('-created_at', '-modified_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Template',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('name', models.CharField(max_length=255, validators=[hireboard.core.validators.validate_title])),
                ('content', models.TextField()),
                ('type', models.CharField(choices=[('email', 'Email'), ('whatsapp', 'WhatsApp')], db_index=True, default='email', max_length=20)),
                ('created_by', cuser.fields.CurrentUserField(add_only=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_template_created', to=settings.AUTH_USER_MODEL)),
                ('modified_by', cuser.fields.CurrentUserField(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_template_modified', to=settings.AUTH_USER_MODEL)),
                ('stage', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='templates', to='recruitment.stage', to_field='slug')),
            ],
            options={
                'ordering': ('id',),
            },
        ),
        migrations.CreateModel(
            name='Candidate',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, validators=[hireboard.core.validators.validate_title])),
                ('email', models.EmailField(max_length=255, unique=True)),
                ('phone', models.CharField(blank=True, max_length=25, validators=[hireboard.core.validators.validate_phone_number])),
                ('position', models.CharField(blank=True, max_length=255)),
                ('source', models.CharField(blank=True, max_length=255)),
                ('rating', models.PositiveSmallIntegerField(default=0, validators=[django.core.validators.MaxValueValidator(5)])),
                ('interview_date', models.CharField(blank=True, max_length=10, validators=[hireboard.core.validators.validate_interview_date])),
                ('interview_time', models.CharField(blank=True, max_length=5, validators=[hireboard.core.validators.validate_interview_time])),
                ('interview_time_changed', models.BooleanField(default=False)),
                ('candidate_reminder_sent', models.BooleanField(default=False)),
                ('interviewer_reminder_sent', models.BooleanField(default=False)),
                ('portal_token', models.CharField(blank=True, db_index=True, max_length=64)),
                ('resume', models.FileField(blank=True, upload_to=hireboard.core.utils.common.get_upload_path, validators=[django.core.validators.FileExtensionValidator(allowed_extensions=['doc', 'docx', 'odt', 'pdf', 'xls', 'xlsx', 'ods', 'txt', 'rtf'])])),
                ('created_by', cuser.fields.CurrentUserField(add_only=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_candidate_created', to=settings.AUTH_USER_MODEL)),
                ('modified_by', cuser.fields.CurrentUserField(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_candidate_modified', to=settings.AUTH_USER_MODEL)),
                ('interviewer', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='interviews', to=settings.AUTH_USER_MODEL)),
                ('stage', models.ForeignKey(default='inbox', on_delete=django.db.models.deletion.PROTECT, related_name='candidates', to='recruitment.stage', to_field='slug')),
            ],
            options={
                'ordering': ('-created_at', '-modified_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='CandidateHistory',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user', models.CharField(max_length=255)),
                ('action', models.CharField(max_length=255)),
                ('details', models.TextField(blank=True)),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='histories', to='recruitment.candidate')),
            ],
            options={
                'ordering': ('-timestamp', '-id'),
            },
        ),
        migrations.CreateModel(
            name='CandidateComment',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user', models.CharField(max_length=255)),
                ('text', models.TextField()),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now)),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='recruitment.candidate')),
            ],
            options={
                'ordering': ('-timestamp', '-id'),
            },
        ),
        migrations.CreateModel(
            name='TestResult',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('modified_at', models.DateTimeField(auto_now=True)),
                ('test_id', models.CharField(max_length=100)),
                ('status', models.CharField(choices=[('not_sent', 'Not Sent'), ('pending', 'Pending'), ('submitted', 'Submitted'), ('review', 'Under Review'), ('passed', 'Passed'), ('failed', 'Failed')], db_index=True, default='not_sent', max_length=20)),
                ('score', models.FloatField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('sent_date', models.DateTimeField(blank=True, null=True)),
                ('deadline_hours', models.PositiveIntegerField(blank=True, null=True)),
                ('file', models.FileField(blank=True, upload_to=hireboard.core.utils.common.get_upload_path)),
                ('result_url', models.URLField(blank=True, max_length=500)),
                ('candidate', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='test_results', to='recruitment.candidate')),
                ('created_by', cuser.fields.CurrentUserField(add_only=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_testresult_created', to=settings.AUTH_USER_MODEL)),
                ('modified_by', cuser.fields.CurrentUserField(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='recruitment_testresult_modified', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('id',),
                'unique_together': {('candidate', 'test_id')},
            },
        ),
    ]
