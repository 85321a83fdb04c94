from enum import IntEnum

from ntstatus import win32
from ntstatus.errors import ErrorDomain, HResultException
from ntstatus.status import NTStatus, lookup_name

FACILITY_NT_BIT = 0x10000000
FACILITY_WIN32 = 7

_SEVERITY_ERROR = 0x80000000


class HResult(IntEnum):
    """Common COM result codes"""
    S_OK = 0x00000000
    S_FALSE = 0x00000001
    E_UNEXPECTED = 0x8000FFFF
    E_NOTIMPL = 0x80004001
    E_NOINTERFACE = 0x80004002
    E_POINTER = 0x80004003
    E_ABORT = 0x80004004
    E_FAIL = 0x80004005
    E_ACCESSDENIED = 0x80070005
    E_HANDLE = 0x80070006
    E_OUTOFMEMORY = 0x8007000E
    E_INVALIDARG = 0x80070057


_MESSAGES = {
    HResult.S_OK: 'The operation completed successfully.',
    HResult.S_FALSE: 'The operation completed with a false result.',
    HResult.E_UNEXPECTED: 'Catastrophic failure',
    HResult.E_NOTIMPL: 'Not implemented',
    HResult.E_NOINTERFACE: 'No such interface supported',
    HResult.E_POINTER: 'Invalid pointer',
    HResult.E_ABORT: 'Operation aborted',
    HResult.E_FAIL: 'Unspecified error',
    HResult.E_ACCESSDENIED: 'Access is denied.',
    HResult.E_HANDLE: 'The handle is invalid.',
    HResult.E_OUTOFMEMORY: 'Not enough memory resources are available to '
                           'complete this operation.',
    HResult.E_INVALIDARG: 'The parameter is incorrect.',
}


def hresult_from_nt(raw):
    """Tags a raw NTSTATUS value as an HRESULT from the NT facility."""
    return (int(raw) | FACILITY_NT_BIT) & 0xFFFFFFFF


def hresult_from_win32(code):
    """Converts a Win32 error code to an HRESULT."""
    code = int(code) & 0xFFFFFFFF
    if code == 0 or code & _SEVERITY_ERROR:
        return code
    return _SEVERITY_ERROR | (FACILITY_WIN32 << 16) | (code & 0xFFFF)


def describe(hr):
    """Returns the text describing an HRESULT, or None if it is unknown.

HRESULTs from the NT facility are described by the name of the
embedded NTSTATUS value; HRESULTs from the Win32 facility by the
Win32 message text.
    """
    hr = int(hr) & 0xFFFFFFFF
    if hr in _MESSAGES:
        return _MESSAGES[hr]

    if hr & FACILITY_NT_BIT:
        name = lookup_name(hr & ~FACILITY_NT_BIT)
        return None if name is None else \
            f'{name} (0x{hr & ~FACILITY_NT_BIT:08X})'

    if (hr >> 16) & 0x7FF == FACILITY_WIN32:
        try:
            return win32.format_message(win32.Win32Error(hr & 0xFFFF))
        except ValueError:
            return None
    return None


class HResultDomain(ErrorDomain):
    """The HRESULT error domain.

`translate()` returns the HRESULT itself when it can be described and
None otherwise.
    """

    not_found = None

    def translate(self, raw):
        hr = int(raw) & 0xFFFFFFFF
        return hr if describe(hr) is not None else self.not_found

    def get_exception(self, descriptor, status, message=None):
        status = NTStatus(status)
        # Reserved bit set: the status is already its own NT-tagged HRESULT.
        if status.raw & FACILITY_NT_BIT:
            text = f'NTSTATUS 0x{status.raw:08X} (HRESULT 0x{descriptor:08X})'
        else:
            text = describe(descriptor)
        return HResultException(status, descriptor, text, message)
