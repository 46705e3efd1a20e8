import time
import numpy as np
import cachematrix

def benchmark_inverse_cache(n, iterations=5):
    print(f"\n--- Benchmarking cached inverse (N={n}) ---")

    a_np = cachematrix.uniform_random_matrix(n, seed=0)
    # Make it diagonally dominant to ensure invertibility
    a_np += np.eye(n) * n

    c = cachematrix.make_cache_matrix(a_np)

    start = time.perf_counter()
    cachematrix.solve_with_cache(c)
    first = time.perf_counter() - start
    print(f"First solve (miss):   {first:.6f} s")

    start = time.perf_counter()
    for _ in range(iterations):
        cachematrix.solve_with_cache(c)
    cached = (time.perf_counter() - start) / iterations
    print(f"Cached solve (hit):   {cached:.6f} s")

    # NumPy (no cache)
    start = time.perf_counter()
    for _ in range(iterations):
        np.linalg.inv(a_np)
    np_time = (time.perf_counter() - start) / iterations
    print(f"NumPy inv:            {np_time:.6f} s")

    speedup = np_time / cached if cached > 0 else 0
    print(f"Speedup:              {speedup:.0f}x")

if __name__ == "__main__":
    print("Starting inverse cache benchmark...")

    for n in [100, 500, 1000, 2000]:
        benchmark_inverse_cache(n)

    print("\nBenchmark complete.")
