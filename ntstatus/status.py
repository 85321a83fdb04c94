from enum import IntEnum
from types import MappingProxyType

_CODE_MASK = 0xFFFF
_CUSTOMER_MASK = 0x20000000
_FACILITY_MASK = 0x0FFF0000
_FACILITY_SHIFT = 16
_SEVERITY_MASK = 0xC0000000
_SEVERITY_SHIFT = 30
_RAW_MASK = 0xFFFFFFFF


class SeverityLevel(IntEnum):
    """Severity of an NTSTATUS value (bits 30-31)."""
    STATUS_SEVERITY_SUCCESS = 0x0
    """successful value, such as STATUS_SUCCESS"""
    STATUS_SEVERITY_INFORMATIONAL = 0x1
    """informational value, such as STATUS_OBJECT_NAME_EXISTS"""
    STATUS_SEVERITY_WARNING = 0x2
    """warning value, such as STATUS_NO_MORE_FILES"""
    STATUS_SEVERITY_ERROR = 0x3
    """error value, such as STATUS_INSUFFICIENT_RESOURCES"""


class FacilityCode(IntEnum):
    """Facility codes defined in ntstatus.h (bits 16-27)."""
    FACILITY_NULL = 0x0
    FACILITY_DEBUGGER = 0x1
    FACILITY_RPC_RUNTIME = 0x2
    FACILITY_RPC_STUBS = 0x3
    FACILITY_IO_ERROR_CODE = 0x4
    FACILITY_CODCLASS_ERROR_CODE = 0x6
    FACILITY_NTWIN32 = 0x7
    FACILITY_NTCERT = 0x8
    FACILITY_NTSSPI = 0x9
    FACILITY_TERMINAL_SERVER = 0xA
    FACILITY_MUI_ERROR_CODE = 0xB
    FACILITY_USB_ERROR_CODE = 0x10
    FACILITY_HID_ERROR_CODE = 0x11
    FACILITY_FIREWIRE_ERROR_CODE = 0x12
    FACILITY_CLUSTER_ERROR_CODE = 0x13
    FACILITY_ACPI_ERROR_CODE = 0x14
    FACILITY_SXS_ERROR_CODE = 0x15
    FACILITY_TRANSACTION = 0x19
    FACILITY_COMMONLOG = 0x1A
    FACILITY_VIDEO = 0x1B
    FACILITY_FILTER_MANAGER = 0x1C
    FACILITY_MONITOR = 0x1D
    FACILITY_GRAPHICS_KERNEL = 0x1E
    FACILITY_DRIVER_FRAMEWORK = 0x20
    FACILITY_FVE_ERROR_CODE = 0x21
    FACILITY_FWP_ERROR_CODE = 0x22
    FACILITY_NDIS_ERROR_CODE = 0x23
    FACILITY_TPM = 0x29
    FACILITY_RTPM = 0x2A
    FACILITY_HYPERVISOR = 0x35
    FACILITY_IPSEC = 0x36
    FACILITY_VIRTUALIZATION = 0x37
    FACILITY_VOLMGR = 0x38
    FACILITY_BCD_ERROR_CODE = 0x39
    FACILITY_WIN32K_NTUSER = 0x3E
    FACILITY_WIN32K_NTGDI = 0x3F
    FACILITY_RESUME_KEY_FILTER = 0x40
    FACILITY_RDBSS = 0x41
    FACILITY_BTH_ATT = 0x42
    FACILITY_SECUREBOOT = 0x43
    FACILITY_AUDIO_KERNEL = 0x44
    FACILITY_VSM = 0x45
    FACILITY_VOLSNAP = 0x50
    FACILITY_SDBUS = 0x51
    FACILITY_SHARED_VHDX = 0x5C
    FACILITY_SMB = 0x5D
    FACILITY_INTERIX = 0x99
    FACILITY_SPACES = 0xE7
    FACILITY_SECURITY_CORE = 0xE8
    FACILITY_SYSTEM_INTEGRITY = 0xE9
    FACILITY_LICENSING = 0xEA
    FACILITY_PLATFORM_MANIFEST = 0xEB
    FACILITY_MAXIMUM_VALUE = 0xEC


def _as_raw(val):
    if isinstance(val, NTStatus):
        return val.raw
    if isinstance(val, bool) or not isinstance(val, int):
        raise TypeError(f'cannot use {type(val).__name__} as an NTSTATUS value')
    return val & _RAW_MASK


def _comparable(val):
    if isinstance(val, NTStatus):
        return val.raw
    if isinstance(val, int) and not isinstance(val, bool) \
            and 0 <= val <= _RAW_MASK:
        return val
    return None


def get_code(raw):
    """Returns the code portion (bits 0-15) of a raw NTSTATUS value."""
    return raw & _CODE_MASK


def is_customer_defined(raw):
    """Returns True if the customer bit (bit 29) of a raw value is set."""
    return (raw & _CUSTOMER_MASK) != 0


def get_facility(raw):
    """Returns the facility (bits 16-27) of a raw NTSTATUS value.

Known facilities are returned as `FacilityCode` members. Facilities
without a name are returned as plain integers.
    """
    fac = (raw & _FACILITY_MASK) >> _FACILITY_SHIFT
    try:
        return FacilityCode(fac)
    except ValueError:
        return fac


def get_severity(raw):
    """Returns the severity level (bits 30-31) of a raw NTSTATUS value."""
    return SeverityLevel((raw & _SEVERITY_MASK) >> _SEVERITY_SHIFT)


class NTStatus:
    """An NTSTATUS value type.

The 32-bit value is laid out as follows (most significant bit first):

    bits 30-31  severity
    bit  29     customer-defined flag
    bit  28     reserved
    bits 16-27  facility
    bits  0-15  code

Instances are immutable. Equality and ordering only consider the raw
32 bits.
    """
    class Codes(IntEnum):
        """Well-known NTSTATUS values"""
        STATUS_SUCCESS = 0x00000000
        """the operation completed successfully"""
        STATUS_WAIT_0 = 0x00000000
        """the caller specified WaitAny and the first object was signaled"""
        STATUS_WAIT_1 = 0x00000001
        """the caller specified WaitAny and the second object was signaled"""
        STATUS_ABANDONED = 0x00000080
        """the caller attempted to wait for an abandoned mutex"""
        STATUS_USER_APC = 0x000000C0
        """a user-mode APC was delivered before the wait completed"""
        STATUS_ALERTED = 0x00000101
        """the delay completed because the thread was alerted"""
        STATUS_TIMEOUT = 0x00000102
        """the given timeout interval expired"""
        STATUS_PENDING = 0x00000103
        """the operation has not completed yet"""
        STATUS_REPARSE = 0x00000104
        """a reparse should be performed by the object manager"""
        STATUS_MORE_ENTRIES = 0x00000105
        """more information is available for the enumeration"""
        STATUS_NOT_ALL_ASSIGNED = 0x00000106
        """not all requested privileges were assigned"""
        STATUS_OBJECT_NAME_EXISTS = 0x40000000
        """an object with the requested name already exists"""
        STATUS_GUARD_PAGE_VIOLATION = 0x80000001
        """a guard page was accessed"""
        STATUS_DATATYPE_MISALIGNMENT = 0x80000002
        """a datatype misalignment was detected"""
        STATUS_BREAKPOINT = 0x80000003
        """a breakpoint was reached"""
        STATUS_SINGLE_STEP = 0x80000004
        """a single step or trace operation completed"""
        STATUS_BUFFER_OVERFLOW = 0x80000005
        """the data was too large to fit in the buffer"""
        STATUS_NO_MORE_FILES = 0x80000006
        """no more files were found matching the specification"""
        STATUS_NO_MORE_ENTRIES = 0x8000001A
        """no more entries are available from the enumeration"""
        STATUS_UNSUCCESSFUL = 0xC0000001
        """the requested operation was unsuccessful"""
        STATUS_NOT_IMPLEMENTED = 0xC0000002
        """the requested operation is not implemented"""
        STATUS_INVALID_INFO_CLASS = 0xC0000003
        """the information class is not valid for the object"""
        STATUS_INFO_LENGTH_MISMATCH = 0xC0000004
        """the specified information record length is wrong"""
        STATUS_ACCESS_VIOLATION = 0xC0000005
        """the memory could not be accessed"""
        STATUS_IN_PAGE_ERROR = 0xC0000006
        """a page of data could not be read in"""
        STATUS_INVALID_HANDLE = 0xC0000008
        """an invalid handle was specified"""
        STATUS_INVALID_PARAMETER = 0xC000000D
        """an invalid parameter was passed to a service or function"""
        STATUS_NO_SUCH_DEVICE = 0xC000000E
        """a device which does not exist was specified"""
        STATUS_NO_SUCH_FILE = 0xC000000F
        """the file does not exist"""
        STATUS_INVALID_DEVICE_REQUEST = 0xC0000010
        """the request is not valid for the target device"""
        STATUS_END_OF_FILE = 0xC0000011
        """the end-of-file marker has been reached"""
        STATUS_NO_MEMORY = 0xC0000017
        """not enough virtual memory or paging file quota"""
        STATUS_ILLEGAL_INSTRUCTION = 0xC000001D
        """an attempt was made to execute an illegal instruction"""
        STATUS_ACCESS_DENIED = 0xC0000022
        """a process has requested access to an object it may not access"""
        STATUS_BUFFER_TOO_SMALL = 0xC0000023
        """the buffer is too small to contain the entry"""
        STATUS_OBJECT_TYPE_MISMATCH = 0xC0000024
        """the object is not of the type required for the operation"""
        STATUS_NONCONTINUABLE_EXCEPTION = 0xC0000025
        """continuation from a noncontinuable exception was attempted"""
        STATUS_OBJECT_NAME_INVALID = 0xC0000033
        """the object name is invalid"""
        STATUS_OBJECT_NAME_NOT_FOUND = 0xC0000034
        """the object name was not found"""
        STATUS_OBJECT_NAME_COLLISION = 0xC0000035
        """the object name already exists"""
        STATUS_OBJECT_PATH_NOT_FOUND = 0xC000003A
        """the path does not exist"""
        STATUS_SHARING_VIOLATION = 0xC0000043
        """the process cannot access the file, it is in use"""
        STATUS_DELETE_PENDING = 0xC0000056
        """a delete operation is pending on the file"""
        STATUS_PRIVILEGE_NOT_HELD = 0xC0000061
        """a required privilege is not held by the client"""
        STATUS_LOGON_FAILURE = 0xC000006D
        """the attempted logon is invalid"""
        STATUS_DISK_FULL = 0xC000007F
        """there is not enough space on the disk"""
        STATUS_INTEGER_DIVIDE_BY_ZERO = 0xC0000094
        """an integer divide by zero was attempted"""
        STATUS_PRIVILEGED_INSTRUCTION = 0xC0000096
        """an attempt was made to execute a privileged instruction"""
        STATUS_INSUFFICIENT_RESOURCES = 0xC000009A
        """insufficient system resources exist to complete the call"""
        STATUS_DEVICE_NOT_READY = 0xC00000A3
        """the device is not ready"""
        STATUS_IO_TIMEOUT = 0xC00000B5
        """the specified I/O operation was not completed in time"""
        STATUS_FILE_IS_A_DIRECTORY = 0xC00000BA
        """the file is a directory"""
        STATUS_NOT_SUPPORTED = 0xC00000BB
        """the request is not supported"""
        STATUS_INTERNAL_ERROR = 0xC00000E5
        """an internal error occurred"""
        STATUS_STACK_OVERFLOW = 0xC00000FD
        """a new guard page for the stack cannot be created"""
        STATUS_DIRECTORY_NOT_EMPTY = 0xC0000101
        """the directory is not empty"""
        STATUS_NOT_A_DIRECTORY = 0xC0000103
        """the file is not a directory"""
        STATUS_CANCELLED = 0xC0000120
        """the I/O request was cancelled"""
        STATUS_DLL_NOT_FOUND = 0xC0000135
        """a required DLL was not found"""
        STATUS_CONTROL_C_EXIT = 0xC000013A
        """the application terminated as a result of a CTRL+C"""
        STATUS_INVALID_DEVICE_STATE = 0xC0000184
        """the device is not in a valid state for the request"""
        STATUS_NOT_FOUND = 0xC0000225
        """the object was not found"""
        STATUS_CONNECTION_REFUSED = 0xC0000236
        """the remote system refused the connection"""
        STATUS_HEAP_CORRUPTION = 0xC0000374
        """a heap has been corrupted"""
        STATUS_STACK_BUFFER_OVERRUN = 0xC0000409
        """a stack-based buffer overrun was detected"""

    __slots__ = ('_value',)

    def __init__(self, raw=0):
        object.__setattr__(self, '_value', _as_raw(raw))

    def __setattr__(self, name, value):
        raise AttributeError('NTStatus values are immutable')

    @classmethod
    def from_raw(cls, raw):
        """Wraps a raw 32-bit value. Every bit pattern is valid."""
        return cls(raw)

    @classmethod
    def from_bool(cls, flag):
        """Returns STATUS_SUCCESS for True and STATUS_UNSUCCESSFUL for
        False.
        """
        return cls(cls.Codes.STATUS_SUCCESS if flag
                   else cls.Codes.STATUS_UNSUCCESSFUL)

    @classmethod
    def make(cls, severity, customer_defined, facility, code):
        """Builds a status value from its component fields.

No range checks are made: `facility` is truncated to 12 bits and
`code` to 16 bits.
        """
        return cls((int(severity) << _SEVERITY_SHIFT)
                   | (_CUSTOMER_MASK if customer_defined else 0)
                   | ((int(facility) << _FACILITY_SHIFT) & _FACILITY_MASK)
                   | (int(code) & _CODE_MASK))

    @property
    def raw(self):
        """Returns the unsigned 32-bit value."""
        return self._value

    @property
    def code(self):
        """Returns the 'code' portion of the status value."""
        return get_code(self._value)

    @property
    def customer_defined(self):
        """Returns True if the status was defined by a customer rather than
        by Microsoft.
        """
        return is_customer_defined(self._value)

    @property
    def facility(self):
        """Returns the 'facility' of the status value."""
        return get_facility(self._value)

    @property
    def severity(self):
        """Returns the severity level of the status value."""
        return get_severity(self._value)

    @property
    def failed(self):
        """Returns True if the status has error severity. Informational
        and warning values are not failures.
        """
        return self.severity == SeverityLevel.STATUS_SEVERITY_ERROR

    @property
    def succeeded(self):
        """Returns True if the status is not a failure."""
        return not self.failed

    def to_int(self):
        """Returns the raw value as a plain integer."""
        return self._value

    def compare_to(self, other):
        """Returns -1, 0 or 1 as the unsigned value of this status is less
        than, equal to or greater than `other`. Integers outside the
        unsigned 32-bit range cannot be compared and raise TypeError.
        """
        other_raw = _comparable(other)
        if other_raw is None:
            raise TypeError(f'cannot compare NTStatus with {other!r}')
        return (self._value > other_raw) - (self._value < other_raw)

    def get_exception(self, message=None, resolver=None):
        """Returns the exception associated with a failing status, or None
        if the status is not a failure.
        """
        from ntstatus import resolve
        return resolve.resolve_error(self, message, resolver=resolver)

    def throw_if_failed(self, message=None, resolver=None):
        """Raises the associated exception if the status is a failure."""
        from ntstatus import resolve
        resolve.throw_if_failed(self, message, resolver=resolver)

    def _compare(self, other):
        other_raw = _comparable(other)
        if other_raw is None:
            return None
        return (self._value > other_raw) - (self._value < other_raw)

    def __eq__(self, other):
        return self._compare(other) == 0

    def __ne__(self, other):
        return self._compare(other) != 0

    def __lt__(self, other):
        res = self._compare(other)
        return NotImplemented if res is None else res < 0

    def __le__(self, other):
        res = self._compare(other)
        return NotImplemented if res is None else res <= 0

    def __gt__(self, other):
        res = self._compare(other)
        return NotImplemented if res is None else res > 0

    def __ge__(self, other):
        res = self._compare(other)
        return NotImplemented if res is None else res >= 0

    def __bool__(self):
        return self.succeeded

    def __hash__(self):
        return hash(self._value)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __str__(self):
        name = lookup_name(self._value)
        return name if name is not None else f'0x{self._value:08X}'

    def __repr__(self):
        return f'<NTStatus {self} (0x{self._value:08X})>'

    def __reduce__(self):
        return (NTStatus, (self._value,))


def _build_names():
    names = {}
    # Iterating __members__ keeps aliases, in declaration order.
    for name, member in NTStatus.Codes.__members__.items():
        names.setdefault(int(member), name)
    return MappingProxyType(names)


_NAMES = _build_names()


def lookup_name(raw):
    """Returns the symbolic name of a raw status value, or None."""
    return _NAMES.get(raw & _RAW_MASK)


# Objects that represent an instance of each well-known status so they
# can be compared directly.

STATUS_SUCCESS = NTStatus(NTStatus.Codes.STATUS_SUCCESS)
STATUS_PENDING = NTStatus(NTStatus.Codes.STATUS_PENDING)
STATUS_TIMEOUT = NTStatus(NTStatus.Codes.STATUS_TIMEOUT)
STATUS_OBJECT_NAME_EXISTS = NTStatus(NTStatus.Codes.STATUS_OBJECT_NAME_EXISTS)
STATUS_BUFFER_OVERFLOW = NTStatus(NTStatus.Codes.STATUS_BUFFER_OVERFLOW)
STATUS_NO_MORE_FILES = NTStatus(NTStatus.Codes.STATUS_NO_MORE_FILES)
STATUS_NO_MORE_ENTRIES = NTStatus(NTStatus.Codes.STATUS_NO_MORE_ENTRIES)
STATUS_UNSUCCESSFUL = NTStatus(NTStatus.Codes.STATUS_UNSUCCESSFUL)
STATUS_NOT_IMPLEMENTED = NTStatus(NTStatus.Codes.STATUS_NOT_IMPLEMENTED)
STATUS_ACCESS_VIOLATION = NTStatus(NTStatus.Codes.STATUS_ACCESS_VIOLATION)
STATUS_INVALID_HANDLE = NTStatus(NTStatus.Codes.STATUS_INVALID_HANDLE)
STATUS_INVALID_PARAMETER = NTStatus(NTStatus.Codes.STATUS_INVALID_PARAMETER)
STATUS_NO_SUCH_FILE = NTStatus(NTStatus.Codes.STATUS_NO_SUCH_FILE)
STATUS_NO_MEMORY = NTStatus(NTStatus.Codes.STATUS_NO_MEMORY)
STATUS_ACCESS_DENIED = NTStatus(NTStatus.Codes.STATUS_ACCESS_DENIED)
STATUS_BUFFER_TOO_SMALL = NTStatus(NTStatus.Codes.STATUS_BUFFER_TOO_SMALL)
STATUS_OBJECT_NAME_NOT_FOUND = \
    NTStatus(NTStatus.Codes.STATUS_OBJECT_NAME_NOT_FOUND)
STATUS_INSUFFICIENT_RESOURCES = \
    NTStatus(NTStatus.Codes.STATUS_INSUFFICIENT_RESOURCES)
STATUS_NOT_SUPPORTED = NTStatus(NTStatus.Codes.STATUS_NOT_SUPPORTED)
STATUS_CANCELLED = NTStatus(NTStatus.Codes.STATUS_CANCELLED)
STATUS_NOT_FOUND = NTStatus(NTStatus.Codes.STATUS_NOT_FOUND)
