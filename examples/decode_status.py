#!/usr/bin/env python3

import sys
from ntstatus import NTStatus

# Decode each status value given on the command line, e.g.
#
#    decode_status.py 0xC0000022 0x80000006

for arg in sys.argv[1:]:
    st = NTStatus(int(arg, 0))
    print(f'{st}: severity={st.severity.name}, facility={st.facility!r}, '
          f'code={st.code:#06x}, customer={st.customer_defined}')
