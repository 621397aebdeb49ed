"""@hireboard_docs"""
from django.utils.functional import cached_property
from rest_framework.serializers import ModelSerializer, Serializer

from hireboard.core.utils.common import DummyObject


class DynamicFieldsSerializerMixin:
    def __init__(self, instance=None, *args, **kwargs):
        # Don't pass the 'fields' arg up to the superclass
        fields = kwargs.pop('fields', None)
        exclude_fields = kwargs.pop('exclude_fields', None)

        # Instantiate the superclass normally
        super().__init__(
            instance, *args, **kwargs
        )

        if fields is not None:
            # Drop any fields that are not specified in the `fields` argument.
            allowed = set(fields)
            existing = set(self.fields.keys())
            for field_name in existing - allowed:
                self.fields.pop(field_name)
        if exclude_fields is not None:
            for field_name in set(exclude_fields):
                self.fields.pop(field_name)


class DummySerializer(DynamicFieldsSerializerMixin, Serializer):
    """
    Read only serializer for non model serializers
    Overrides create and update but does nothing in that
    """

    def create(self, validated_data):
        return DummyObject(**validated_data)

    def update(self, instance, validated_data):
        return instance


class DynamicFieldsModelSerializer(DynamicFieldsSerializerMixin, ModelSerializer):
    """
    A ModelSerializer that takes an additional `fields` and 'exclude_fields'
    argument that controls which fields should be displayed and not to be
    displayed.
    """

    @cached_property
    def request(self):
        return self.context.get("request")
