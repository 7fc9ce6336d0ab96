# portal/log.py
#
# Logger compartilhado do portal com tempo decorrido desde o start.
# Uma unica funcao log() usada por servicos e infraestrutura; stdout com
# flush para aparecer imediatamente no terminal do uvicorn.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[portal {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
