import unittest

import numpy as np

import cachematrix
from cachematrix import invert, uniform_random_matrix
from cachematrix._internal.coercion import as_square_float_array, safe_shape


class TestInvert(unittest.TestCase):
    def test_identity(self):
        np.testing.assert_allclose(invert(np.eye(4)), np.eye(4))

    def test_matches_numpy(self):
        m = uniform_random_matrix(12, seed=7) + np.eye(12)
        np.testing.assert_allclose(invert(m), np.linalg.inv(m))

    def test_does_not_modify_input(self):
        m = np.array([[4.0, 7.0], [2.0, 6.0]])
        before = m.copy()
        invert(m)
        np.testing.assert_array_equal(m, before)

    def test_error_hierarchy(self):
        self.assertTrue(issubclass(cachematrix.DimensionError, ValueError))
        self.assertTrue(issubclass(cachematrix.DimensionError, cachematrix.CacheMatrixError))
        self.assertTrue(issubclass(cachematrix.SingularMatrixError, np.linalg.LinAlgError))
        self.assertTrue(
            issubclass(cachematrix.SingularMatrixError, cachematrix.CacheMatrixError)
        )

    def test_singular_error_is_chained(self):
        with self.assertRaises(cachematrix.SingularMatrixError) as ctx:
            invert([[1.0, 2.0], [2.0, 4.0]])
        self.assertIsInstance(ctx.exception.__cause__, np.linalg.LinAlgError)

    def test_dimension_errors(self):
        cases = [
            [1.0, 2.0],
            [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]],
            np.zeros((2, 2, 2)),
            np.empty((0, 0)),
        ]
        for case in cases:
            with self.subTest(case=np.asarray(case).shape):
                with self.assertRaises(cachematrix.DimensionError):
                    invert(case)

    def test_non_numeric_input_is_type_error(self):
        for case in ([["a", "b"], ["c", "d"]], [[1.0, 2.0], [3.0]]):
            with self.subTest(case=case):
                with self.assertRaises(TypeError):
                    invert(case)


class TestCoercion(unittest.TestCase):
    def test_promotes_to_lapack_dtypes(self):
        self.assertEqual(as_square_float_array([[1, 0], [0, 1]]).dtype, np.float64)
        self.assertEqual(as_square_float_array([[True, False], [False, True]]).dtype, np.float64)
        self.assertEqual(as_square_float_array(np.eye(2, dtype=np.float16)).dtype, np.float64)
        self.assertEqual(as_square_float_array(np.eye(2, dtype=np.float32)).dtype, np.float32)
        self.assertEqual(
            as_square_float_array(np.eye(2, dtype=np.complex64)).dtype, np.complex64
        )

    def test_safe_shape(self):
        self.assertEqual(safe_shape(np.zeros((3, 2))), (3, 2))
        self.assertEqual(safe_shape([[1, 2], [3, 4], [5, 6]]), (3, 2))
        self.assertIsNone(safe_shape([[1, 2], [3]]))
        self.assertIsNone(safe_shape([1, 2]))
        self.assertIsNone(safe_shape(np.zeros(3)))
        self.assertIsNone(safe_shape("ab"))


class TestUniformRandomMatrix(unittest.TestCase):
    def test_shape_and_range(self):
        m = uniform_random_matrix(20, seed=0)
        self.assertEqual(m.shape, (20, 20))
        self.assertEqual(m.dtype, np.float64)
        self.assertTrue(np.all(m >= 0.0))
        self.assertTrue(np.all(m < 1.0))

    def test_seed_is_reproducible(self):
        np.testing.assert_array_equal(
            uniform_random_matrix(5, seed=3), uniform_random_matrix(5, seed=3)
        )

    def test_rejects_non_positive_size(self):
        with self.assertRaises(ValueError):
            uniform_random_matrix(0)


if __name__ == "__main__":
    unittest.main()
