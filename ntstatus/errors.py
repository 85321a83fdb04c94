from abc import ABC, abstractmethod

from ntstatus.status import NTStatus, lookup_name


class StatusException(Exception):
    """Base class of the exceptions raised for failing NTSTATUS values.

The failing value is available as `status`. `description` holds the
text supplied by the error domain and `message` the caller's text, if
any. `args` holds the constructor arguments so the exceptions survive
pickling.
    """

    def __init__(self, status, description, message=None):
        self.status = NTStatus(status)
        self.description = description
        self.message = message
        super().__init__(self.status, description, message)

    def __str__(self):
        if self.message:
            return f'{self.message}: {self.description}'
        return str(self.description)


class Win32Exception(StatusException):
    """A failure described by a Win32 error code"""

    def __init__(self, status, error_code, description, message=None):
        self.error_code = error_code
        super().__init__(status, description, message)
        self.args = (self.status, error_code, description, message)


class HResultException(StatusException):
    """A failure described by an HRESULT"""

    def __init__(self, status, hresult, description, message=None):
        self.hresult = hresult
        super().__init__(status, description, message)
        self.args = (self.status, hresult, description, message)


class UnmappedStatusException(StatusException):
    """A failure neither error domain could describe"""

    def __init__(self, status, message=None):
        status = NTStatus(status)
        name = lookup_name(status.raw)
        if name is None:
            description = f'Unknown NTSTATUS error 0x{status.raw:08X}'
        else:
            description = f'Unknown NTSTATUS error {name} ' \
                f'(0x{status.raw:08X})'
        super().__init__(status, description, message)
        self.args = (status, message)


class ErrorDomain(ABC):
    """A status-code domain which can describe a raw value.

`translate()` returns a descriptor for a raw value, or `not_found`
when the domain has no mapping for it. `get_exception()` turns a
descriptor into an exception.
    """

    not_found = None

    @abstractmethod
    def translate(self, raw):
        pass

    @abstractmethod
    def get_exception(self, descriptor, status, message=None):
        pass
