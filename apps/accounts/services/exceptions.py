"""Errors raised by member account services; views map them to 400/401/403."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserRegistrationError(AccountsServiceError):
    """The email is already taken by another member or staff account."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password; the message does not say which."""
    pass


class InactiveAccountError(AccountsServiceError):
    """The account was deactivated from the admin."""
    pass
