"""
Benchmark the Ed25519 key service: time per call and peak memory (tracemalloc).

Run from repo root:

  PYTHONPATH=src python benchmarks/service.py

Or after pip install -e .:

  python benchmarks/service.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from edkeys import (PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, ed25519_is_valid_point,
                    export_keys, generate, release, sign, verify)

N_TIME = 2000
N_MEM = 500
MSG = b"bench message for ed25519"


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(20):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def _generate_release() -> None:
    release(generate())


def main() -> None:
    handle = generate()
    if handle is None:
        print("Ed25519 key generation failed; check the OpenSSL build behind cryptography.")
        sys.exit(1)
    pub = bytearray(PUBLIC_KEY_SIZE)
    priv = bytearray(PRIVATE_KEY_SIZE)
    export_keys(handle, pub, priv)
    pub = bytes(pub)
    sig = sign(handle, MSG)

    print("Benchmark: edkeys Ed25519 key service")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    rows = [
        ("generate + release", _generate_release, ()),
        ("export_keys", export_keys, (handle, bytearray(32), bytearray(32))),
        ("sign", sign, (handle, MSG)),
        ("verify", verify, (pub, MSG, sig)),
        ("ed25519_is_valid_point", ed25519_is_valid_point, (pub,)),
    ]
    print("  --- Time per call ---")
    for name, fn, args in rows:
        t = _time_per_call(fn, *args) * 1000
        print(f"  {name:<24} {t:.4f} ms")
    print()

    print("  --- Peak memory (KiB) ---")
    for name, fn, args in rows:
        print(f"  {name:<24} {_peak_kb(fn, *args):.2f}")

    release(handle)


if __name__ == "__main__":
    main()
