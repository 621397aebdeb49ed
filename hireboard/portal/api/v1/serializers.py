from rest_framework import serializers

from hireboard.core.mixins.serializers import DummySerializer
from hireboard.core.validators import validate_result_url
from hireboard.recruitment.constants import (
    PORTAL_STAGE_MESSAGES, PORTAL_DEFAULT_STAGE_MESSAGE
)
from hireboard.recruitment.models import Candidate


class PortalTestSerializer(DummySerializer):
    test_id = serializers.CharField()
    name = serializers.CharField()
    url = serializers.CharField()
    status = serializers.CharField()
    result_url = serializers.CharField()
    sent_date = serializers.DateTimeField()
    deadline_hours = serializers.IntegerField()


class PortalCandidateSerializer(serializers.ModelSerializer):
    """What a candidate sees about their own application, nothing more."""
    stage = serializers.ReadOnlyField(source='stage.title')
    stage_message = serializers.SerializerMethodField()
    tests = serializers.SerializerMethodField()
    company_name = serializers.SerializerMethodField()

    class Meta:
        model = Candidate
        fields = (
            'name', 'position', 'stage', 'stage_message', 'interview_date',
            'interview_time', 'company_name', 'tests'
        )
        read_only_fields = fields

    @staticmethod
    def get_stage_message(instance):
        return PORTAL_STAGE_MESSAGES.get(instance.stage_id, PORTAL_DEFAULT_STAGE_MESSAGE)

    def get_company_name(self, instance):
        return self.context['setting'].company_name

    def get_tests(self, instance):
        return PortalTestSerializer(self.context['tests'], many=True).data


class PortalTestSubmitSerializer(DummySerializer):
    result_url = serializers.CharField(
        max_length=500, validators=[validate_result_url]
    )
