"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CustomerNotFoundError(DomainException):
    """Referenced customer does not exist"""

    pass


class DuplicatePhoneError(DomainException):
    """Another customer already uses this phone number"""

    pass


class CreditNotFoundError(DomainException):
    """Referenced credit does not exist"""

    pass


class InvalidCreditError(DomainException):
    """Credit request violates a business rule"""

    pass


class InvalidPaymentError(DomainException):
    """Payment request violates a business rule"""

    pass


class InvalidReportPeriodError(DomainException):
    """Report filter or date bounds are not usable"""

    pass


class AuthenticationError(DomainException):
    """Email or password did not match an operator account"""

    pass
