"""NTSTATUS values and their translation to Python exceptions."""

from ntstatus.status import (NTStatus, FacilityCode, SeverityLevel,
                             get_code, get_facility, get_severity,
                             is_customer_defined, lookup_name)
from ntstatus.errors import (StatusException, Win32Exception,
                             HResultException, UnmappedStatusException,
                             ErrorDomain)
from ntstatus.resolve import (ErrorResolver, configure, resolve_error,
                              throw_if_failed)

__all__ = [
    'NTStatus', 'FacilityCode', 'SeverityLevel', 'get_code', 'get_facility',
    'get_severity', 'is_customer_defined', 'lookup_name', 'StatusException',
    'Win32Exception', 'HResultException', 'UnmappedStatusException',
    'ErrorDomain', 'ErrorResolver', 'configure', 'resolve_error',
    'throw_if_failed',
]
