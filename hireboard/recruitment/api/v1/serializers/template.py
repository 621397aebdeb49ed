from rest_framework import serializers

from hireboard.core.mixins.serializers import DynamicFieldsModelSerializer
from hireboard.recruitment.models import Template, Stage


class TemplateSerializer(DynamicFieldsModelSerializer):
    stage = serializers.SlugRelatedField(
        slug_field='slug',
        queryset=Stage.objects.all(),
        allow_null=True,
        required=False
    )

    class Meta:
        model = Template
        fields = ('id', 'name', 'content', 'type', 'stage', 'created_at', 'modified_at')
        read_only_fields = ('created_at', 'modified_at')

    def validate_content(self, content):
        if not content.strip():
            raise serializers.ValidationError('Template content may not be blank.')
        return content
