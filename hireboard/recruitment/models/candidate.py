import secrets
import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import FileExtensionValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from hireboard.common.models import BaseModel
from hireboard.core.utils.common import get_upload_path
from hireboard.core.validators import (
    validate_title, validate_phone_number, validate_interview_date,
    validate_interview_time
)
from hireboard.recruitment.constants import (
    INBOX, MAX_RATING, CANDIDATE_ACTOR, PORTAL_LINK_CREATED,
    TEST_RESULT_STATUS_CHOICES, NOT_SENT
)


def get_actor_name(user=None):
    """Display name written on history and comments."""
    if user is None or not getattr(user, 'is_authenticated', False):
        return CANDIDATE_ACTOR
    return user.full_name


class Candidate(BaseModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, validators=[validate_title])
    email = models.EmailField(max_length=255, unique=True)
    phone = models.CharField(
        max_length=25, blank=True, validators=[validate_phone_number]
    )
    position = models.CharField(max_length=255, blank=True)
    source = models.CharField(max_length=255, blank=True)
    rating = models.PositiveSmallIntegerField(
        default=0, validators=[MaxValueValidator(MAX_RATING)]
    )
    stage = models.ForeignKey(
        'recruitment.Stage',
        to_field='slug',
        related_name='candidates',
        on_delete=models.PROTECT,
        default=INBOX
    )

    # interview, date is YYYY/MM/DD in settings.INTERVIEW_DATE_CALENDAR
    interview_date = models.CharField(
        max_length=10, blank=True, validators=[validate_interview_date]
    )
    interview_time = models.CharField(
        max_length=5, blank=True, validators=[validate_interview_time]
    )
    interview_time_changed = models.BooleanField(default=False)
    interviewer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='interviews',
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )
    candidate_reminder_sent = models.BooleanField(default=False)
    interviewer_reminder_sent = models.BooleanField(default=False)

    portal_token = models.CharField(max_length=64, blank=True, db_index=True)
    resume = models.FileField(
        upload_to=get_upload_path,
        blank=True,
        validators=[FileExtensionValidator(
            allowed_extensions=settings.ACCEPTED_FILE_FORMATS['documents']
        )]
    )

    def __str__(self):
        return self.name

    @property
    def has_resume(self):
        return bool(self.resume)

    @property
    def portal_url(self):
        if not self.portal_token:
            return None
        return f"{settings.FRONTEND_URL}/?candidateId={self.id}&token={self.portal_token}"

    def add_history(self, action, details='', user=None):
        return CandidateHistory.objects.create(
            candidate=self,
            user=get_actor_name(user),
            action=action,
            details=details or ''
        )

    def generate_portal_token(self, user=None):
        """
        Generates the portal token once, later calls return the same token.
        """
        if self.portal_token:
            return self.portal_token
        self.portal_token = secrets.token_urlsafe(24)
        self.save(update_fields=['portal_token', 'modified_at'])
        self.add_history(PORTAL_LINK_CREATED, user=user)
        return self.portal_token


class CandidateHistory(models.Model):
    """
    Append only audit trail of a candidate, newest first.
    """
    candidate = models.ForeignKey(
        Candidate, related_name='histories', on_delete=models.CASCADE
    )
    user = models.CharField(max_length=255)
    action = models.CharField(max_length=255)
    details = models.TextField(blank=True)
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ('-timestamp', '-id')

    def __str__(self):
        return f"{self.user} {self.action}"

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValidationError(_("History entries can not be modified."))
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(_("History entries can not be deleted."))


class CandidateComment(models.Model):
    candidate = models.ForeignKey(
        Candidate, related_name='comments', on_delete=models.CASCADE
    )
    user = models.CharField(max_length=255)
    text = models.TextField()
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ('-timestamp', '-id')

    def __str__(self):
        return f"{self.user}: {self.text[:50]}"


class TestResult(BaseModel):
    candidate = models.ForeignKey(
        Candidate, related_name='test_results', on_delete=models.CASCADE
    )
    # id of an item of RecruitmentSetting.test_library
    test_id = models.CharField(max_length=100)
    status = models.CharField(
        max_length=20, choices=TEST_RESULT_STATUS_CHOICES, default=NOT_SENT,
        db_index=True
    )
    score = models.FloatField(null=True, blank=True)
    notes = models.TextField(blank=True)
    sent_date = models.DateTimeField(null=True, blank=True)
    deadline_hours = models.PositiveIntegerField(null=True, blank=True)
    file = models.FileField(upload_to=get_upload_path, blank=True)
    result_url = models.URLField(max_length=500, blank=True)

    class Meta:
        ordering = ('id',)
        unique_together = ('candidate', 'test_id')

    def __str__(self):
        return f"{self.candidate} - {self.test_id}"
