from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class ErrorResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    error = serializers.CharField()


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        user = register_user(
            email=data['email'],
            password=data['password'],
            display_name=data.get('displayName', '')
        )
    except UserRegistrationError as e:
        return Response(
            {'message': 'Error registering user', 'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password']
        )
    except InvalidCredentialsError as e:
        return Response(
            {'message': 'Invalid credentials', 'error': str(e)},
            status=status.HTTP_401_UNAUTHORIZED
        )
    except InactiveAccountError as e:
        return Response(
            {'message': 'Account is deactivated', 'error': str(e)},
            status=status.HTTP_403_FORBIDDEN
        )

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)
