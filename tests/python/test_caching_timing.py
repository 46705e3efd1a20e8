"""Cached solves should be faster than the first solve.

Wall-clock timings are noisy, so a slow first solve is reported as a
CacheMatrixPerformanceWarning instead of failing the suite. Set
CACHEMATRIX_STRICT_TIMING=1 to turn that warning into a failure.
"""

import os
import time
import unittest
import warnings

import cachematrix
from cachematrix import harness


class TestCachingTiming(unittest.TestCase):
    def test_first_solve_slower_than_cached_solves(self):
        n = 500
        c = cachematrix.make_cache_matrix(cachematrix.uniform_random_matrix(n, seed=42))

        elapsed = []
        results = []
        for _ in range(4):
            start = time.perf_counter()
            inv = cachematrix.solve_with_cache(c)
            elapsed.append(time.perf_counter() - start)
            self.assertEqual(inv.shape, (n, n))
            results.append(inv)

        for inv in results[1:]:
            self.assertIs(inv, results[0])

        if os.environ.get("CACHEMATRIX_STRICT_TIMING") == "1":
            self.assertTrue(harness.check_timings(elapsed))
            return

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            ok = harness.check_timings(elapsed, soft=True)

        if ok:
            self.assertEqual(w, [])
        else:
            self.assertTrue(
                any(issubclass(x.category, cachematrix.CacheMatrixPerformanceWarning) for x in w)
            )
            print(f"\nN={n} first={elapsed[0]:.6f}s cached={max(elapsed[1:]):.6f}s (soft miss)")


if __name__ == "__main__":
    unittest.main()
