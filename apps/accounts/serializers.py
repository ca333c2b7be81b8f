from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    displayName = serializers.CharField(source='display_name', required=False, allow_blank=True, max_length=100)
    community = serializers.UUIDField(source='community_id', read_only=True, allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    lastLogin = serializers.DateTimeField(source='last_login', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'displayName',
            'community',
            'createdAt',
            'lastLogin',
        ]
        read_only_fields = ['id', 'email']


class UserMinimalSerializer(serializers.ModelSerializer):
    """Resolved member identity for nested serialization."""

    displayName = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'email', 'displayName']
        read_only_fields = fields

    def get_displayName(self, obj):
        return obj.get_display_name()


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(required=True, max_length=255)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    passwordConfirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )
    displayName = serializers.CharField(required=False, allow_blank=True, max_length=100, default='')

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['passwordConfirm']:
            raise serializers.ValidationError({
                'passwordConfirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
