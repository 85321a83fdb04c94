#!/usr/bin/env python3

import logging
import ntstatus

FORMAT = '%(asctime)-15s [%(levelname)s] %(message)s'
logging.basicConfig(format=FORMAT)

log = logging.getLogger('ntstatus')
log.setLevel(logging.DEBUG)

# STATUS_ACCESS_DENIED has a Win32 mapping. STATUS_ACCESS_VIOLATION has
# none in the built-in table, so it is described through its HRESULT.

for raw in (0xC0000022, 0xC0000005, 0xC0ABCDEF):
    try:
        ntstatus.throw_if_failed(raw, 'reading the device')
    except ntstatus.Win32Exception as ex:
        print(f'Win32 error {ex.error_code}: {ex}')
    except ntstatus.StatusException as ex:
        print(f'{type(ex).__name__}: {ex}')
