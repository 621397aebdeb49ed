from django.contrib.auth import get_user_model
from rest_framework import serializers

from hireboard.core.mixins.serializers import DummySerializer
from hireboard.recruitment.constants import TEMPLATE_TYPE_CHOICES

User = get_user_model()


class StageChangePreviewSerializer(DummySerializer):
    stage = serializers.SlugField(max_length=100)
    interview_date = serializers.CharField(max_length=10, required=False, allow_blank=True)
    interview_time = serializers.CharField(max_length=5, required=False, allow_blank=True)


class StageChangeSerializer(StageChangePreviewSerializer):
    """
    Confirmation of a stage change. Omitted `send` and `channels` default to
    what the preview proposed.
    """
    interviewer = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(is_active=True),
        required=False,
        allow_null=True
    )
    send = serializers.BooleanField(required=False, allow_null=True, default=None)
    channels = serializers.ListField(
        child=serializers.ChoiceField(choices=TEMPLATE_TYPE_CHOICES),
        required=False,
        allow_empty=True
    )
    message = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    subject = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, max_length=255
    )

    def get_confirm_kwargs(self):
        data = self.validated_data
        return {
            'interview_date': data.get('interview_date') or None,
            'interview_time': data.get('interview_time') or None,
            'interviewer': data.get('interviewer'),
            'set_interviewer': 'interviewer' in data,
            'send': data.get('send'),
            'channels': data.get('channels'),
            'message': data.get('message'),
            'subject': data.get('subject'),
        }
