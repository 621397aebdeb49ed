import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import serializers
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError, TokenBackendError
from rest_framework_simplejwt.serializers import (TokenRefreshSerializer,
                                                  TokenObtainPairSerializer, PasswordField)
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView, TokenObtainPairView

from hireboard.users.api.v1.serializers.user import MeSerializer

User = get_user_model()
LOGIN_FAILED = None if settings.DEBUG else "Unable to login with given credentials."

logger = logging.getLogger(__name__)


def d_raise(msg):
    """
    :param msg: Message to display
    :return: Raises proper message behind login failed in debug state.
    Just displays unable to login while debug is false.
    """
    raise ValidationError(LOGIN_FAILED or msg)


class CustomTokenRefreshSerializer(TokenRefreshSerializer):
    user = None

    def validate(self, attrs):
        ret = super().validate(attrs)
        user_id = RefreshToken(attrs['refresh']).payload.get(
            settings.SIMPLE_JWT['USER_ID_CLAIM']
        )
        self.user = User.objects.filter(id=user_id).first()
        if not self.user or not self.user.is_active:
            raise ValidationError("User is inactive")
        return ret


class TokenWithMeMixin:
    @staticmethod
    def me_response(user):
        return MeSerializer(user).data


class CustomTokenRefreshView(TokenWithMeMixin, TokenRefreshView):
    def post(self, request, *args, **kwargs):
        ser = CustomTokenRefreshSerializer(
            data=request.data
        )
        try:
            ser.is_valid(raise_exception=True)
        except (TokenError, TokenBackendError):
            return Response({
                'refresh': 'Token is Invalid or Expired'
            }, status=400)
        return Response({
            'token': ser.validated_data,
            **self.me_response(ser.user),
        })


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Login with either username or email.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['username'] = serializers.CharField(required=False)
        self.fields['email'] = serializers.CharField(required=False)
        self.fields['password'] = PasswordField(trim_whitespace=False)

    auth_fields = ['username', 'email']
    user = None

    def validate(self, attrs):
        username = attrs.get('username') or attrs.get('email')
        password = attrs.get('password')
        if not username:
            d_raise("Username or email is required.")
        for auth_field in self.auth_fields:
            self.user = User.objects.filter(
                **{auth_field + '__iexact': username}
            ).first()
            if self.user:
                break
        if self.user and not self.user.is_active:
            d_raise("User is inactive.")
        if self.user and self.user.check_password(password):
            refresh = self.get_token(self.user)
            logger.info(f"{self.user.username} logged in.")
            return dict(
                refresh=str(refresh),
                access=str(refresh.access_token)
            )
        d_raise("Either user does not exist or username password was incorrect.")


class CustomTokenObtainView(TokenWithMeMixin, TokenObtainPairView):
    serializer_class = CustomTokenObtainPairSerializer

    def post(self, request, *args, **kwargs):
        ser = CustomTokenObtainPairSerializer(
            data=request.data
        )
        ser.is_valid(raise_exception=True)
        return Response({
            'token': ser.validated_data,
            **self.me_response(ser.user),
        })
