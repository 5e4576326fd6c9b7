#!/usr/bin/env python3
"""Quick envelope encode benchmark - scalar vs NumPy line encoder"""
import os
import time


DATA = os.urandom(45 * 20000)


def bench(fast: bool):
    """Benchmark one encoder path"""
    from uucodec.main import uucodec

    uucodec._FAST_ENABLED = fast
    start = time.perf_counter()
    for _ in range(10):
        result = uucodec.encode_file("bench.bin", None, DATA)
    elapsed = time.perf_counter() - start
    return elapsed, result


def main():
    print("Benchmarking uuencode envelope (10 iterations)...")
    print(f"Input size: {len(DATA)} bytes\n")

    print("Scalar ...")
    scalar_time, scalar_result = bench(False)
    print(f"  Time: {scalar_time:.3f}s ({scalar_time / 10 * 1000:.2f} ms/op)")

    print("NumPy ...")
    fast_time, fast_result = bench(True)
    print(f"  Time: {fast_time:.3f}s ({fast_time / 10 * 1000:.2f} ms/op)")

    if fast_result != scalar_result:
        raise SystemExit("❌ NumPy output differs from scalar output")
    print(f"\n✅ Outputs match, speedup {scalar_time / fast_time:.1f}x")


if __name__ == '__main__':
    main()
