"""Login service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check email and password and stamp last_login.

    Emails match case-insensitively. Unknown email and wrong password
    fail with the same error. The returned user carries its current
    community_id, which login responses expose as `community`.

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=email)
        .first()
    )

    if user is None or not user.check_password(password):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s logged in (community %s)", user.id, user.community_id)
    return user
