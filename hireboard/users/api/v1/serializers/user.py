from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from hireboard.core.mixins.serializers import DynamicFieldsModelSerializer

User = get_user_model()


class UserThinSerializer(DynamicFieldsModelSerializer):
    class Meta:
        model = User
        fields = ('id', 'username', 'name', 'email')


class UserSerializer(DynamicFieldsModelSerializer):
    password = serializers.CharField(
        write_only=True, required=False, trim_whitespace=False,
        style={'input_type': 'password'}
    )

    class Meta:
        model = User
        fields = (
            'id', 'username', 'name', 'email', 'password', 'is_admin',
            'is_active', 'kanban_background', 'created_at'
        )
        read_only_fields = ('created_at',)

    def validate_username(self, username):
        username = username.strip().lower()
        qs = User.objects.filter(username__iexact=username)
        if self.instance:
            qs = qs.exclude(id=self.instance.id)
        if qs.exists():
            raise serializers.ValidationError(
                'User with this username already exists.'
            )
        return username

    def validate_password(self, password):
        validate_password(password)
        return password

    def validate(self, attrs):
        if not self.instance and not attrs.get('password'):
            raise serializers.ValidationError({
                'password': ['This field is required.']
            })
        return attrs

    def create(self, validated_data):
        password = validated_data.pop('password')
        username = validated_data.pop('username')
        return User.objects.create_user(username, password, **validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        if password:
            instance.set_password(password)
        return super().update(instance, validated_data)


class MeSerializer(UserSerializer):
    class Meta(UserSerializer.Meta):
        read_only_fields = ('username', 'is_admin', 'is_active', 'created_at')
