#!/usr/bin/env python3

import pickle

import pytest

from ntstatus.status import (NTStatus, FacilityCode, SeverityLevel,
                             get_code, get_facility, get_severity,
                             is_customer_defined, lookup_name)
import ntstatus.status

SAMPLES = [0x00000000, 0x00000001, 0x40000000, 0x80000006, 0xC0000001,
           0xC0040005, 0xE0FF1234, 0x3FFFFFFF, 0xFFFFFFFF, 0x1ABC0000]


def test_success_fields():
    st = NTStatus.from_raw(0x00000000)
    assert st.severity == SeverityLevel.STATUS_SEVERITY_SUCCESS
    assert not st.failed
    assert st.succeeded
    assert not st.customer_defined
    assert st.facility == 0
    assert st.facility is FacilityCode.FACILITY_NULL
    assert st.code == 0


def test_error_fields():
    st = NTStatus.from_raw(0xC0000001)
    assert st.severity == SeverityLevel.STATUS_SEVERITY_ERROR
    assert st.failed
    assert not st.succeeded
    assert st.facility == 0
    assert st.code == 1


def test_informational_and_warning_are_not_failures():
    assert NTStatus(0x40000000).severity == \
        SeverityLevel.STATUS_SEVERITY_INFORMATIONAL
    assert NTStatus(0x80000006).severity == \
        SeverityLevel.STATUS_SEVERITY_WARNING
    assert not NTStatus(0x40000000).failed
    assert not NTStatus(0x80000006).failed


@pytest.mark.parametrize('raw', SAMPLES)
def test_failed_tracks_error_severity(raw):
    st = NTStatus(raw)
    assert st.severity in SeverityLevel
    assert st.failed == (st.severity == SeverityLevel.STATUS_SEVERITY_ERROR)
    assert st.succeeded != st.failed


@pytest.mark.parametrize('raw', SAMPLES)
def test_lossless_conversion(raw):
    st = NTStatus.from_raw(raw)
    assert st.raw == raw
    assert int(st) == raw
    assert st.to_int() == raw
    assert NTStatus(int(st)) == st


@pytest.mark.parametrize('raw', SAMPLES)
def test_decode_then_make(raw):
    st = NTStatus.make(get_severity(raw), is_customer_defined(raw),
                       get_facility(raw), get_code(raw))
    assert st.raw == raw & ~0x10000000


def test_make():
    st = NTStatus.make(SeverityLevel.STATUS_SEVERITY_ERROR, False, 0x4,
                       0x0005)
    assert st.raw == 0xC0040005
    assert st.facility is FacilityCode.FACILITY_IO_ERROR_CODE

    st = NTStatus.make(SeverityLevel.STATUS_SEVERITY_WARNING, True,
                       FacilityCode.FACILITY_NTWIN32, 0x1234)
    assert st.raw == 0xA0071234
    assert st.customer_defined


def test_make_truncates_wide_fields():
    st = NTStatus.make(SeverityLevel.STATUS_SEVERITY_SUCCESS, False,
                       0x1FFF, 0x12345)
    assert st.raw == 0x0FFF2345


def test_unknown_facility_is_numeric():
    st = NTStatus(0xC0FF0001)
    assert st.facility == 0xFF
    assert not isinstance(st.facility, FacilityCode)


def test_signed_values_wrap():
    assert NTStatus(-1073741819).raw == 0xC0000005
    assert NTStatus(NTStatus(5)).raw == 5


def test_rejects_non_integers():
    with pytest.raises(TypeError):
        NTStatus('0xC0000005')
    with pytest.raises(TypeError):
        NTStatus(1.0)


def test_equality():
    a = NTStatus(0xC0000001)
    b = NTStatus(0xC0000001)
    c = NTStatus(0x00000001)
    assert a == a
    assert a == b and b == a
    assert a != c
    assert a == 0xC0000001
    assert a != 'STATUS_UNSUCCESSFUL'
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2


def test_ordering_is_unsigned():
    assert NTStatus(0x00000001) < NTStatus(0xC0000001)
    assert NTStatus(0xFFFFFFFF) > NTStatus(0x7FFFFFFF)
    assert NTStatus(0x80000006) <= 0x80000006
    assert NTStatus(0x10).compare_to(0x20) == -1
    assert NTStatus(0x20).compare_to(NTStatus(0x20)) == 0
    assert NTStatus(0x30).compare_to(0x20) == 1
    assert sorted([NTStatus(3), NTStatus(1), NTStatus(2)]) == [1, 2, 3]


def test_compare_to_rejects_other_types():
    with pytest.raises(TypeError):
        NTStatus(1).compare_to('1')
    with pytest.raises(TypeError):
        NTStatus(1) < 'a'


def test_immutable():
    st = NTStatus(1)
    with pytest.raises(AttributeError):
        st.raw = 2
    with pytest.raises(AttributeError):
        st._value = 2
    assert st.raw == 1


def test_pickle():
    st = NTStatus(0xC0000022)
    assert pickle.loads(pickle.dumps(st)) == st


def test_str_uses_symbolic_name():
    assert str(NTStatus(0xC0000022)) == 'STATUS_ACCESS_DENIED'
    assert str(ntstatus.status.STATUS_NO_MORE_FILES) == 'STATUS_NO_MORE_FILES'


def test_str_first_declared_name_wins():
    assert NTStatus.Codes.STATUS_WAIT_0 == NTStatus.Codes.STATUS_SUCCESS
    assert str(NTStatus(0)) == 'STATUS_SUCCESS'


def test_str_falls_back_to_hex():
    assert str(NTStatus(0xC0ABCDEF)) == '0xC0ABCDEF'
    assert str(NTStatus(0x2a)) == '0x0000002A'
    assert lookup_name(0xC0ABCDEF) is None
    assert repr(NTStatus(0xC0000005)) == \
        '<NTStatus STATUS_ACCESS_VIOLATION (0xC0000005)>'


def test_from_bool():
    assert NTStatus.from_bool(True) == ntstatus.status.STATUS_SUCCESS
    assert NTStatus.from_bool(False) == ntstatus.status.STATUS_UNSUCCESSFUL


def test_equality_agrees_with_hash():
    st = NTStatus(0xFFFFFFFF)
    assert st == 0xFFFFFFFF
    assert 0xFFFFFFFF in {st}
    assert st != -1
    assert -1 not in {st}


def test_out_of_range_ints_are_not_equal():
    assert NTStatus(5) != 0x100000005
    assert not NTStatus(5) == 0x100000005
    with pytest.raises(TypeError):
        NTStatus(5).compare_to(0x100000005)
    with pytest.raises(TypeError):
        NTStatus(5) < -1


def test_bool_is_succeeded():
    assert not NTStatus(0xC0000001)
    assert NTStatus(0)
    assert NTStatus(0x80000006)
    assert bool(NTStatus.from_bool(False)) is False
