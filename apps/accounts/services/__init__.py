"""Member accounts: sign-up and email/password sign-in.

New accounts start on the free tier; premium comes from
``apps.subscriptions``. Staff accounts sign in the same way and are then
kept out of the member surface by the access policies.
"""

from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    # Services
    'register_user',
    'authenticate_user',
]
