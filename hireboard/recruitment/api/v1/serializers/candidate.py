from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjValidationError
from rest_framework import serializers

from hireboard.core.mixins.serializers import DynamicFieldsModelSerializer, DummySerializer
from hireboard.core.validators import (
    validate_result_url, validate_interview_date, validate_description, validate_file_size
)
from hireboard.recruitment.constants import (
    CANDIDATE_CREATED, CANDIDATE_UPDATED, TEST_RESULT_UPDATED, EMAIL,
    TEMPLATE_TYPE_CHOICES, DEFAULT_TEST_DEADLINE_HOURS
)
from hireboard.recruitment.models import (
    Candidate, CandidateHistory, CandidateComment, TestResult, RecruitmentSetting
)
from hireboard.recruitment.models.candidate import get_actor_name
from hireboard.users.api.v1.serializers.user import UserThinSerializer

User = get_user_model()


class CandidateHistorySerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = CandidateHistory
        fields = ('id', 'user', 'action', 'details', 'timestamp')
        read_only_fields = ('user', 'timestamp')
        extra_kwargs = {
            'details': {'validators': [validate_description]}
        }

    def validate_action(self, action):
        if not action.strip():
            raise serializers.ValidationError('History text may not be blank.')
        return action.strip()

    def create(self, validated_data):
        return self.context['candidate'].add_history(
            validated_data['action'],
            details=validated_data.get('details', ''),
            user=self.request.user
        )


class CandidateCommentSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = CandidateComment
        fields = ('id', 'user', 'text', 'timestamp')
        read_only_fields = ('user', 'timestamp')
        extra_kwargs = {
            'text': {'validators': [validate_description]}
        }

    def validate_text(self, text):
        if not text.strip():
            raise serializers.ValidationError('Comment may not be blank.')
        return text

    def create(self, validated_data):
        validated_data['candidate'] = self.context['candidate']
        validated_data['user'] = get_actor_name(self.request.user)
        return super().create(validated_data)


class TestResultSerializer(DynamicFieldsModelSerializer):
    test_name = serializers.SerializerMethodField()

    class Meta:
        model = TestResult
        fields = (
            'id', 'test_id', 'test_name', 'status', 'score', 'notes', 'sent_date',
            'deadline_hours', 'file', 'result_url', 'modified_at'
        )
        read_only_fields = ('modified_at',)
        extra_kwargs = {
            'result_url': {'validators': [validate_result_url]}
        }

    def get_test_name(self, instance):
        test = self.setting.get_test(instance.test_id)
        return test.get('name') if test else None

    @property
    def setting(self):
        setting = self.context.get('setting')
        if setting is None:
            setting = RecruitmentSetting.get_solo()
            self.context['setting'] = setting
        return setting

    @staticmethod
    def validate_file(file):
        return validate_file_size(file)

    def validate_test_id(self, test_id):
        if not self.setting.get_test(test_id):
            raise serializers.ValidationError(f'Test "{test_id}" is not in the test library.')
        return test_id

    def create(self, validated_data):
        """Upsert by test_id, a candidate has at most one result per test."""
        candidate = self.context['candidate']
        test_id = validated_data.pop('test_id')
        instance, _ = TestResult.objects.update_or_create(
            candidate=candidate,
            test_id=test_id,
            defaults=validated_data
        )
        test = self.setting.get_test(test_id)
        candidate.add_history(
            TEST_RESULT_UPDATED.format(test=test.get('name', test_id)),
            user=self.request.user
        )
        return instance


class CandidateSerializer(DynamicFieldsModelSerializer):
    interviewer = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(is_active=True),
        allow_null=True,
        required=False
    )
    stage_title = serializers.ReadOnlyField(source='stage.title')
    has_resume = serializers.ReadOnlyField()
    portal_url = serializers.ReadOnlyField()

    class Meta:
        model = Candidate
        fields = (
            'id', 'name', 'email', 'phone', 'position', 'source', 'rating',
            'stage', 'stage_title', 'interview_date', 'interview_time',
            'interview_time_changed', 'interviewer', 'candidate_reminder_sent',
            'interviewer_reminder_sent', 'resume', 'has_resume', 'portal_url',
            'created_at', 'modified_at'
        )
        read_only_fields = (
            'stage', 'interview_time_changed', 'candidate_reminder_sent',
            'interviewer_reminder_sent', 'created_at', 'modified_at'
        )

    def get_fields(self):
        fields = super().get_fields()
        if self.request and self.request.method == 'GET':
            fields['interviewer'] = UserThinSerializer(
                fields=['id', 'name', 'username'], read_only=True
            )
        return fields

    @staticmethod
    def validate_resume(resume):
        return validate_file_size(resume)

    def validate_email(self, email):
        email = email.strip().lower()
        qs = Candidate.objects.filter(email__iexact=email)
        if self.instance:
            qs = qs.exclude(id=self.instance.id)
        if qs.exists():
            raise serializers.ValidationError('Candidate with this email already exists.')
        return email

    def validate(self, attrs):
        interview_date = attrs.get(
            'interview_date', getattr(self.instance, 'interview_date', '')
        )
        interview_time = attrs.get(
            'interview_time', getattr(self.instance, 'interview_time', '')
        )
        if bool(interview_date) != bool(interview_time):
            raise serializers.ValidationError({
                'interview_time' if interview_date else 'interview_date':
                    ['Interview date and time must be set together.']
            })
        return attrs

    def create(self, validated_data):
        instance = super().create(validated_data)
        instance.add_history(CANDIDATE_CREATED, user=self.request.user)
        return instance

    def update(self, instance, validated_data):
        schedule_changed = any(
            field in validated_data and validated_data[field] != getattr(instance, field)
            for field in ('interview_date', 'interview_time')
        )
        if schedule_changed:
            instance.interview_time_changed = bool(
                instance.interview_date or instance.interview_time
            )
            instance.candidate_reminder_sent = False
            instance.interviewer_reminder_sent = False
        if 'interviewer' in validated_data and validated_data['interviewer'] != instance.interviewer:
            instance.interviewer_reminder_sent = False

        instance = super().update(instance, validated_data)
        instance.add_history(CANDIDATE_UPDATED, user=self.request.user)
        return instance


class CandidateThinSerializer(DynamicFieldsModelSerializer):
    stage_title = serializers.ReadOnlyField(source='stage.title')

    class Meta:
        model = Candidate
        fields = (
            'id', 'name', 'position', 'stage', 'stage_title', 'interview_date',
            'interview_time'
        )


class CommunicateSerializer(DummySerializer):
    """
    Message for a single candidate, either a template rendered for the
    candidate or free text.
    """
    channel = serializers.ChoiceField(choices=TEMPLATE_TYPE_CHOICES, default=EMAIL)
    template = serializers.IntegerField(required=False, allow_null=True)
    message = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    subject = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def validate(self, attrs):
        if not attrs.get('template') and not (attrs.get('message') or '').strip():
            raise serializers.ValidationError({
                'message': ['Select a template or write a message.']
            })
        return attrs


class BulkCommunicateSerializer(CommunicateSerializer):
    candidates = serializers.PrimaryKeyRelatedField(
        queryset=Candidate.objects.all(), many=True, allow_empty=False
    )


class SendTestsSerializer(DummySerializer):
    tests = serializers.ListField(
        child=serializers.CharField(max_length=100), allow_empty=False
    )
    deadline_hours = serializers.IntegerField(
        min_value=1, required=False, allow_null=True,
        default=DEFAULT_TEST_DEADLINE_HOURS
    )
    channel = serializers.ChoiceField(
        choices=TEMPLATE_TYPE_CHOICES, default=EMAIL
    )

    def validate_tests(self, tests):
        setting = RecruitmentSetting.get_solo()
        unknown = [test_id for test_id in tests if not setting.get_test(test_id)]
        if unknown:
            raise serializers.ValidationError(
                f'Unknown tests: {", ".join(unknown)}.'
            )
        return list(dict.fromkeys(tests))


class CalendarQuerySerializer(DummySerializer):
    start = serializers.CharField(max_length=10)
    end = serializers.CharField(max_length=10)

    def validate(self, attrs):
        for field in ('start', 'end'):
            try:
                validate_interview_date(attrs[field])
            except DjValidationError as e:
                raise serializers.ValidationError({field: e.messages})
        if attrs['start'] > attrs['end']:
            raise serializers.ValidationError({'end': ['End must not be before start.']})
        return attrs
