import ctypes
import logging
import sys
from enum import IntEnum

from ntstatus.errors import ErrorDomain, Win32Exception
from ntstatus.status import NTStatus

_log = logging.getLogger(__name__)


class Win32Error(IntEnum):
    """Common Win32 system error codes"""
    ERROR_SUCCESS = 0
    ERROR_INVALID_FUNCTION = 1
    ERROR_FILE_NOT_FOUND = 2
    ERROR_PATH_NOT_FOUND = 3
    ERROR_ACCESS_DENIED = 5
    ERROR_INVALID_HANDLE = 6
    ERROR_NOT_ENOUGH_MEMORY = 8
    ERROR_NOT_READY = 21
    ERROR_GEN_FAILURE = 31
    ERROR_SHARING_VIOLATION = 32
    ERROR_HANDLE_EOF = 38
    ERROR_NOT_SUPPORTED = 50
    ERROR_INVALID_PARAMETER = 87
    ERROR_DISK_FULL = 112
    ERROR_INSUFFICIENT_BUFFER = 122
    ERROR_DIR_NOT_EMPTY = 145
    ERROR_ALREADY_EXISTS = 183
    ERROR_MR_MID_NOT_FOUND = 317
    ERROR_OPERATION_ABORTED = 995
    ERROR_NOT_FOUND = 1168
    ERROR_PRIVILEGE_NOT_HELD = 1314
    ERROR_LOGON_FAILURE = 1326
    ERROR_NO_SYSTEM_RESOURCES = 1450


ERROR_MR_MID_NOT_FOUND = Win32Error.ERROR_MR_MID_NOT_FOUND

_MESSAGES = {
    Win32Error.ERROR_SUCCESS: 'The operation completed successfully.',
    Win32Error.ERROR_INVALID_FUNCTION: 'Incorrect function.',
    Win32Error.ERROR_FILE_NOT_FOUND: 'The system cannot find the file specified.',
    Win32Error.ERROR_PATH_NOT_FOUND: 'The system cannot find the path specified.',
    Win32Error.ERROR_ACCESS_DENIED: 'Access is denied.',
    Win32Error.ERROR_INVALID_HANDLE: 'The handle is invalid.',
    Win32Error.ERROR_NOT_ENOUGH_MEMORY:
        'Not enough memory resources are available to process this command.',
    Win32Error.ERROR_NOT_READY: 'The device is not ready.',
    Win32Error.ERROR_GEN_FAILURE:
        'A device attached to the system is not functioning.',
    Win32Error.ERROR_SHARING_VIOLATION:
        'The process cannot access the file because it is being used by '
        'another process.',
    Win32Error.ERROR_HANDLE_EOF: 'Reached the end of the file.',
    Win32Error.ERROR_NOT_SUPPORTED: 'The request is not supported.',
    Win32Error.ERROR_INVALID_PARAMETER: 'The parameter is incorrect.',
    Win32Error.ERROR_DISK_FULL: 'There is not enough space on the disk.',
    Win32Error.ERROR_INSUFFICIENT_BUFFER:
        'The data area passed to a system call is too small.',
    Win32Error.ERROR_DIR_NOT_EMPTY: 'The directory is not empty.',
    Win32Error.ERROR_ALREADY_EXISTS:
        'Cannot create a file when that file already exists.',
    Win32Error.ERROR_MR_MID_NOT_FOUND:
        'The system cannot find message text for message number 0x%1 in '
        'the message file for %2.',
    Win32Error.ERROR_OPERATION_ABORTED:
        'The I/O operation has been aborted because of either a thread exit '
        'or an application request.',
    Win32Error.ERROR_NOT_FOUND: 'Element not found.',
    Win32Error.ERROR_PRIVILEGE_NOT_HELD:
        'A required privilege is not held by the client.',
    Win32Error.ERROR_LOGON_FAILURE:
        'The user name or password is incorrect.',
    Win32Error.ERROR_NO_SYSTEM_RESOURCES:
        'Insufficient system resources exist to complete the requested '
        'service.',
}

# Subset of the mappings RtlNtStatusToDosError() performs.

_Codes = NTStatus.Codes

_DOS_ERRORS = {
    _Codes.STATUS_SUCCESS: Win32Error.ERROR_SUCCESS,
    _Codes.STATUS_UNSUCCESSFUL: Win32Error.ERROR_GEN_FAILURE,
    _Codes.STATUS_NOT_IMPLEMENTED: Win32Error.ERROR_INVALID_FUNCTION,
    _Codes.STATUS_INVALID_HANDLE: Win32Error.ERROR_INVALID_HANDLE,
    _Codes.STATUS_INVALID_PARAMETER: Win32Error.ERROR_INVALID_PARAMETER,
    _Codes.STATUS_NO_SUCH_FILE: Win32Error.ERROR_FILE_NOT_FOUND,
    _Codes.STATUS_END_OF_FILE: Win32Error.ERROR_HANDLE_EOF,
    _Codes.STATUS_NO_MEMORY: Win32Error.ERROR_NOT_ENOUGH_MEMORY,
    _Codes.STATUS_ACCESS_DENIED: Win32Error.ERROR_ACCESS_DENIED,
    _Codes.STATUS_BUFFER_TOO_SMALL: Win32Error.ERROR_INSUFFICIENT_BUFFER,
    _Codes.STATUS_OBJECT_NAME_NOT_FOUND: Win32Error.ERROR_FILE_NOT_FOUND,
    _Codes.STATUS_OBJECT_NAME_COLLISION: Win32Error.ERROR_ALREADY_EXISTS,
    _Codes.STATUS_OBJECT_PATH_NOT_FOUND: Win32Error.ERROR_PATH_NOT_FOUND,
    _Codes.STATUS_SHARING_VIOLATION: Win32Error.ERROR_SHARING_VIOLATION,
    _Codes.STATUS_PRIVILEGE_NOT_HELD: Win32Error.ERROR_PRIVILEGE_NOT_HELD,
    _Codes.STATUS_LOGON_FAILURE: Win32Error.ERROR_LOGON_FAILURE,
    _Codes.STATUS_DISK_FULL: Win32Error.ERROR_DISK_FULL,
    _Codes.STATUS_INSUFFICIENT_RESOURCES:
        Win32Error.ERROR_NO_SYSTEM_RESOURCES,
    _Codes.STATUS_DEVICE_NOT_READY: Win32Error.ERROR_NOT_READY,
    _Codes.STATUS_NOT_SUPPORTED: Win32Error.ERROR_NOT_SUPPORTED,
    _Codes.STATUS_DIRECTORY_NOT_EMPTY: Win32Error.ERROR_DIR_NOT_EMPTY,
    _Codes.STATUS_CANCELLED: Win32Error.ERROR_OPERATION_ABORTED,
    _Codes.STATUS_NOT_FOUND: Win32Error.ERROR_NOT_FOUND,
}


def nt_status_to_dos_error(raw):
    """Converts a raw NTSTATUS value to its Win32 error code using the
    built-in table. Returns ERROR_MR_MID_NOT_FOUND for values without a
    mapping.
    """
    return _DOS_ERRORS.get(int(raw), ERROR_MR_MID_NOT_FOUND)


def format_message(code):
    """Returns the built-in message text of a Win32 error code."""
    try:
        return _MESSAGES[code]
    except KeyError:
        return f'Unknown error ({int(code)})'


def native_translator():
    """Returns ntdll's RtlNtStatusToDosError() as a Python callable.

Raises OSError when not running on Windows.
    """
    if sys.platform != 'win32':
        raise OSError('ntdll is only available on Windows')

    func = ctypes.WinDLL('ntdll').RtlNtStatusToDosError
    func.argtypes = [ctypes.c_ulong]
    func.restype = ctypes.c_ulong
    _log.debug('bound ntdll.RtlNtStatusToDosError')
    return lambda raw: func(raw)


def native_formatter():
    """Returns a callable which uses FormatMessage() to describe a Win32
    error code. Raises OSError when not running on Windows.
    """
    if sys.platform != 'win32':
        raise OSError('FormatMessage is only available on Windows')
    return lambda code: ctypes.FormatError(int(code)).strip()


class Win32Domain(ErrorDomain):
    """The Win32 (DOS) error domain.

`translator` maps a raw NTSTATUS value to a Win32 error code and
`formatter` maps a Win32 error code to text. Both default to the
built-in tables.
    """

    not_found = ERROR_MR_MID_NOT_FOUND

    def __init__(self, translator=None, formatter=None):
        self._translator = translator or nt_status_to_dos_error
        self._formatter = formatter or format_message

    def translate(self, raw):
        return self._translator(raw)

    def get_exception(self, descriptor, status, message=None):
        try:
            code = Win32Error(descriptor)
        except ValueError:
            code = int(descriptor)
        return Win32Exception(status, code, self._formatter(code), message)
