"""@hireboard_docs"""

"""
Moving a candidate to another stage of the board

1. A stage change is requested for (candidate, target stage). Nothing is
   written at this point, the request only computes a preview.

2. Target stages whose slug starts with `interview` take the interview
   scheduling path: an interview date and time must be given on
   confirmation, an interviewer is optional and only the email template bound
   to the stage is offered.

3. Every other stage takes the standard path: email and WhatsApp templates
   bound to the stage are both offered, email preferred when both exist.

4. When a template exists, sending defaults to true and the message is
   rendered with the candidate, the company profile and the stage title.
   Without a template, sending defaults to false and a warning is returned.

5. On confirmation, a history entry is added and the stage (plus the
   interview fields on the interview path) is saved in one transaction.
   Compose links are built afterwards for every selected channel. A failing
   channel, e.g. a candidate without a phone number, is reported in the
   results and never undoes the stage change.

6. Requesting the stage the candidate is already in is a no-op.
"""
import logging

from django.core.exceptions import ValidationError as DjValidationError
from django.db import transaction
from django.utils.functional import cached_property
from rest_framework.exceptions import ValidationError

from hireboard.core.validators import validate_interview_date, validate_interview_time
from hireboard.recruitment.constants import (
    EMAIL, WHATSAPP, STAGE_CHANGED, INTERVIEW_SCHEDULED, ARCHIVED, INBOX,
    RESTORED_FROM_ARCHIVE
)
from hireboard.recruitment.models import Candidate, RecruitmentSetting, Template
from hireboard.recruitment.utils.dispatch import dispatch, get_default_subject
from hireboard.recruitment.utils.stages import StageRegistry
from hireboard.recruitment.utils.template import render_template_message, build_context

logger = logging.getLogger(__name__)


class StageChangeInfo:
    """The requested transition, discarded once confirmed or cancelled."""

    def __init__(self, candidate, new_stage):
        self.candidate = candidate
        self.new_stage = new_stage

    def __repr__(self):
        return f"<StageChangeInfo {self.candidate.id} -> {self.new_stage.slug}>"


class _InterviewCandidate:
    """Candidate as it will look once the interview is scheduled."""

    def __init__(self, candidate, interview_date, interview_time):
        self.name = candidate.name
        self.position = candidate.position
        self.interview_date = interview_date or candidate.interview_date
        self.interview_time = interview_time or candidate.interview_time


class StageChangeWorkflow:
    def __init__(self, info, user=None):
        self.info = info
        self.user = user

    @property
    def candidate(self):
        return self.info.candidate

    @property
    def new_stage(self):
        return self.info.new_stage

    @cached_property
    def setting(self):
        return RecruitmentSetting.get_solo()

    @cached_property
    def is_noop(self):
        return self.candidate.stage_id == self.new_stage.slug

    @cached_property
    def requires_schedule(self):
        return self.new_stage.is_interview

    @cached_property
    def templates(self):
        """
        Template per channel bound to the target stage, lowest id wins.
        """
        channels = [EMAIL] if self.requires_schedule else [EMAIL, WHATSAPP]
        templates = {}
        for channel in channels:
            templates[channel] = Template.objects.filter(
                stage_id=self.new_stage.slug, type=channel
            ).order_by('id').first()
        return templates

    @property
    def available_channels(self):
        return [channel for channel, template in self.templates.items() if template]

    @property
    def preferred_channel(self):
        channels = self.available_channels
        if not channels:
            return None
        return EMAIL if EMAIL in channels else channels[0]

    def render(self, channel, interview_date=None, interview_time=None):
        template = self.templates.get(channel)
        if not template:
            return ''
        candidate = self.candidate
        if self.requires_schedule:
            candidate = _InterviewCandidate(candidate, interview_date, interview_time)
        return render_template_message(
            template.content,
            candidate,
            build_context(self.setting, stage=self.new_stage)
        )

    def preview(self, interview_date=None, interview_time=None):
        data = {
            'candidate': str(self.candidate.id),
            'current_stage': self.candidate.stage_id,
            'new_stage': {
                'slug': self.new_stage.slug,
                'title': self.new_stage.title,
            },
            'noop': self.is_noop,
            'requires_schedule': self.requires_schedule,
            'send': False,
            'channel': None,
            'channels': [],
            'templates': {},
            'messages': {},
            'subject': get_default_subject(self.setting.company_name),
            'warnings': [],
        }
        if self.is_noop:
            return data

        for channel, template in self.templates.items():
            data['templates'][channel] = (
                {'id': template.id, 'name': template.name} if template else None
            )
            if template:
                data['messages'][channel] = self.render(
                    channel, interview_date, interview_time
                )

        data['channels'] = self.available_channels
        data['channel'] = self.preferred_channel
        data['send'] = bool(self.available_channels)
        if not data['send']:
            kind = 'email template' if self.requires_schedule else 'template'
            data['warnings'].append(
                f'No {kind} is defined for stage "{self.new_stage.title}", '
                f'the candidate will be moved without notification.'
            )
        return data

    @staticmethod
    def _validate_schedule(interview_date, interview_time):
        errors = {}
        for field, value, validator in (
            ('interview_date', interview_date, validate_interview_date),
            ('interview_time', interview_time, validate_interview_time),
        ):
            if not value:
                errors[field] = ['This field is required for interview stages.']
                continue
            try:
                validator(value)
            except DjValidationError as e:
                errors[field] = e.messages
        if errors:
            raise ValidationError(errors)

    def _apply_schedule(self, interview_date, interview_time, interviewer, set_interviewer):
        candidate = self.candidate
        previously_set = bool(candidate.interview_date or candidate.interview_time)
        changed = (
            candidate.interview_date != interview_date
            or candidate.interview_time != interview_time
        )
        if changed:
            candidate.interview_time_changed = previously_set
            candidate.candidate_reminder_sent = False
            candidate.interviewer_reminder_sent = False
        candidate.interview_date = interview_date
        candidate.interview_time = interview_time
        if set_interviewer:
            if interviewer != candidate.interviewer:
                candidate.interviewer_reminder_sent = False
            candidate.interviewer = interviewer

    def confirm(self, interview_date=None, interview_time=None, interviewer=None,
                send=None, channels=None, message=None, subject=None,
                set_interviewer=None):
        """
        Apply the stage change.

        :param interview_date: YYYY/MM/DD, required on interview stages
        :param interview_time: HH:MM, required on interview stages
        :param interviewer: user taking the interview, optional
        :param send: prepare messages, defaults to whether a template exists
        :param channels: channels to prepare, defaults to the preferred one
        :param message: message text overriding the rendered template
        :param subject: email subject
        :param set_interviewer: whether `interviewer` is given, defaults to
            `interviewer is not None`
        :return: dict with the candidate and the dispatch results
        """
        if self.is_noop:
            return {'candidate': self.candidate, 'noop': True, 'results': []}

        if self.requires_schedule:
            self._validate_schedule(interview_date, interview_time)

        if send is None:
            send = bool(self.available_channels)
        if not channels:
            channels = [self.preferred_channel or EMAIL]
        for channel in channels:
            if channel not in (EMAIL, WHATSAPP):
                raise ValidationError({'channels': [f'Unknown channel "{channel}".']})

        messages = {}
        if send:
            for channel in channels:
                text = message if message is not None else self.render(
                    channel, interview_date, interview_time
                )
                if not (text or '').strip():
                    raise ValidationError({
                        'message': [f'There is no {channel} message to send for this stage.']
                    })
                messages[channel] = text

        candidate = self.candidate
        previous_stage = candidate.stage_id
        with transaction.atomic():
            details = ''
            if self.requires_schedule:
                self._apply_schedule(
                    interview_date, interview_time, interviewer,
                    interviewer is not None if set_interviewer is None else set_interviewer
                )
                details = INTERVIEW_SCHEDULED.format(date=interview_date, time=interview_time)
            candidate.add_history(
                STAGE_CHANGED.format(stage=self.new_stage.title),
                details=details,
                user=self.user
            )
            candidate.stage = self.new_stage
            candidate.save()

        logger.info(
            f"Candidate {candidate.id} moved from {previous_stage} to {self.new_stage.slug}."
        )

        subject = subject or get_default_subject(self.setting.company_name)
        results = []
        for channel, text in messages.items():
            destination = candidate.email if channel == EMAIL else candidate.phone
            results.append(
                dispatch(channel, destination, text, subject=subject).as_dict()
            )
        return {'candidate': candidate, 'noop': False, 'results': results}


def _get_candidate(candidate_id):
    try:
        return Candidate.objects.select_related('stage').get(id=candidate_id)
    except (Candidate.DoesNotExist, DjValidationError):
        raise ValidationError({'candidate': f'Candidate "{candidate_id}" does not exist.'})


def request_stage_change(candidate_id, target_stage_id, user=None):
    """
    Entry point of a stage change, returns the workflow whose `preview`
    tells the caller what confirming would do.
    """
    candidate = candidate_id if isinstance(candidate_id, Candidate) \
        else _get_candidate(candidate_id)
    stage = StageRegistry().get(target_stage_id)
    return StageChangeWorkflow(StageChangeInfo(candidate, stage), user=user)


def confirm_stage_change(candidate_id, target_stage_id, user=None, **kwargs):
    return request_stage_change(candidate_id, target_stage_id, user=user).confirm(**kwargs)


def archive_candidate(candidate, user=None):
    """Archiving is a stage change to the hidden archive stage, without messages."""
    return request_stage_change(candidate, ARCHIVED, user=user).confirm(send=False)


def unarchive_candidate(candidate, user=None):
    """Move an archived candidate back to the inbox."""
    if candidate.stage_id != ARCHIVED:
        raise ValidationError({'stage': 'Candidate is not archived.'})
    with transaction.atomic():
        candidate.stage = StageRegistry().get(INBOX)
        candidate.save()
        candidate.add_history(RESTORED_FROM_ARCHIVE, user=user)
    logger.info(f"Candidate {candidate.id} restored from archive.")
    return candidate
