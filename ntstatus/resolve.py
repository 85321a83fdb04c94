import logging
import threading

from ntstatus import hresult, win32
from ntstatus.defaults.config import Defaults
from ntstatus.errors import UnmappedStatusException
from ntstatus.status import NTStatus

_log = logging.getLogger(__name__)


class ErrorResolver:
    """Turns failing NTSTATUS values into exceptions.

A failing value is first offered to the `numeric` (Win32) domain. If
that domain has no mapping, the value is tagged as an NT-facility
HRESULT and offered to the `packed` domain. If neither domain can
describe it, an `UnmappedStatusException` is produced so that a failure
is never dropped.
    """

    def __init__(self, numeric=None, packed=None):
        self.numeric = numeric or win32.Win32Domain()
        self.packed = packed or hresult.HResultDomain()

    def resolve(self, status, message=None):
        """Returns the exception for `status`, or None if it succeeded."""
        status = NTStatus(status)
        if status.succeeded:
            return None

        werr = self.numeric.translate(status.raw)
        if werr != self.numeric.not_found:
            _log.debug('%s maps to Win32 error %s', status, werr)
            return self.numeric.get_exception(werr, status, message)

        hr = hresult.hresult_from_nt(status.raw)
        _log.debug('no Win32 mapping for %s, trying HRESULT 0x%08X',
                   status, hr)
        desc = self.packed.translate(hr)
        if desc != self.packed.not_found:
            return self.packed.get_exception(desc, status, message)

        _log.debug('no description found for %s', status)
        return UnmappedStatusException(status, message)

    def throw_if_failed(self, status, message=None):
        """Raises the exception for `status` if it is a failure."""
        exc = self.resolve(status, message)
        if exc is not None:
            raise exc


def create_resolver(config):
    """Builds a resolver from a `Defaults` configuration."""
    translator = formatter = None
    if config.translator == "ntdll":
        translator = win32.native_translator()
    elif config.translator != "table":
        raise ValueError(f"Configuration value for translator, "
                         f"'{config.translator}', is not a valid value")
    if config.messages == "system":
        formatter = win32.native_formatter()
    elif config.messages != "table":
        raise ValueError(f"Configuration value for messages, "
                         f"'{config.messages}', is not a valid value")
    _log.debug('creating resolver for the %s environment',
               config.environment)
    return ErrorResolver(win32.Win32Domain(translator, formatter),
                         hresult.HResultDomain())


_lock = threading.Lock()
_default = None


def default_resolver():
    """Returns the process-wide resolver, creating it on first use."""
    global _default

    with _lock:
        if _default is None:
            _default = create_resolver(Defaults())
        return _default


def configure(config=None):
    """Replaces the process-wide resolver with one built from `config`.
    Passing None resets it to the platform defaults.
    """
    global _default

    resolver = create_resolver(config or Defaults())
    with _lock:
        _default = resolver
    return resolver


def resolve_error(status, message=None, resolver=None):
    """Returns the exception associated with a failing status, or None.

`status` may be an NTStatus or a raw integer.
    """
    return (resolver or default_resolver()).resolve(status, message)


def throw_if_failed(status, message=None, resolver=None):
    """Raises the exception associated with `status` if it is a failure.

`status` may be an NTStatus or a raw integer.
    """
    (resolver or default_resolver()).throw_if_failed(status, message)
