"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    display_name: str = ""
) -> User:
    """
    Register a new user.

    New users start without a community; they get one by creating or
    joining a community.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        display_name: Optional display name

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise UserRegistrationError(f"User with email {email} already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            display_name=display_name
        )
    except IntegrityError:
        raise UserRegistrationError(f"User with email {email} already exists")

    logger.info("Registered user %s", user.id)
    return user
