#!/usr/bin/env python3

import sys

import pytest

from ntstatus import hresult, win32
from ntstatus.errors import HResultException, Win32Exception
from ntstatus.status import NTStatus


def test_dos_error_table():
    assert win32.nt_status_to_dos_error(0xC0000022) == \
        win32.Win32Error.ERROR_ACCESS_DENIED
    assert win32.nt_status_to_dos_error(NTStatus(0xC000003A)) == 3
    assert win32.nt_status_to_dos_error(0xC0ABCDEF) == \
        win32.ERROR_MR_MID_NOT_FOUND


def test_format_message():
    assert win32.format_message(2) == \
        'The system cannot find the file specified.'
    assert win32.format_message(99999) == 'Unknown error (99999)'


def test_win32_domain_uses_injected_callables():
    domain = win32.Win32Domain(translator=lambda raw: 1234,
                               formatter=lambda code: f'text {code}')
    assert domain.translate(0xC0000001) == 1234
    exc = domain.get_exception(1234, NTStatus(0xC0000001), 'ctx')
    assert isinstance(exc, Win32Exception)
    assert exc.error_code == 1234
    assert str(exc) == 'ctx: text 1234'


def test_win32_domain_sentinel():
    domain = win32.Win32Domain()
    assert domain.translate(0xC0ABCDEF) == domain.not_found


@pytest.mark.skipif(sys.platform == 'win32', reason='non-Windows only')
def test_native_bindings_need_windows():
    with pytest.raises(OSError):
        win32.native_translator()
    with pytest.raises(OSError):
        win32.native_formatter()


def test_hresult_from_nt():
    assert hresult.hresult_from_nt(0xC0000005) == 0xD0000005
    assert hresult.hresult_from_nt(NTStatus(0x00000001)) == 0x10000001


def test_hresult_from_win32():
    assert hresult.hresult_from_win32(5) == hresult.HResult.E_ACCESSDENIED
    assert hresult.hresult_from_win32(0) == 0
    assert hresult.hresult_from_win32(0x80004005) == 0x80004005


def test_describe():
    assert hresult.describe(hresult.HResult.E_FAIL) == 'Unspecified error'
    assert hresult.describe(0xD0000022) == \
        'STATUS_ACCESS_DENIED (0xC0000022)'
    assert hresult.describe(0x80070002) == \
        'The system cannot find the file specified.'
    assert hresult.describe(0x80070999) is None
    assert hresult.describe(0xD0ABCDEF) is None
    assert hresult.describe(0x800A0001) is None


def test_hresult_domain():
    domain = hresult.HResultDomain()
    assert domain.translate(0xD0000005) == 0xD0000005
    assert domain.translate(0xD0ABCDEF) is domain.not_found

    exc = domain.get_exception(0xD0000005, 0xC0000005)
    assert isinstance(exc, HResultException)
    assert exc.hresult == 0xD0000005
    assert exc.status == NTStatus(0xC0000005)
    assert exc.message is None
