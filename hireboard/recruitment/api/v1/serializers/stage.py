from rest_framework import serializers

from hireboard.core.mixins.serializers import DynamicFieldsModelSerializer, DummySerializer
from hireboard.recruitment.models import Stage


class StageSerializer(DynamicFieldsModelSerializer):
    candidate_count = serializers.SerializerMethodField()

    class Meta:
        model = Stage
        fields = ('slug', 'title', 'is_core', 'order', 'candidate_count')
        read_only_fields = ('slug', 'is_core', 'order')

    @staticmethod
    def get_candidate_count(instance):
        count = getattr(instance, 'candidate_count', None)
        if count is None:
            count = instance.candidates.count()
        return count


class StageReorderSerializer(DummySerializer):
    order = serializers.ListField(
        child=serializers.SlugField(max_length=100),
        allow_empty=True
    )
