#To run tests:
#In this file: [python -m unittest test.test_Motion.test_Inertia]
#In all files in the current directory: [python -m unittest discover]
#Add [-v] for verbose output (displays names of all test functions)

import unittest
from test.testUtilities import assertMatricesAlmostEqual

import numpy as np

from RIGIDSIM.Motion import Inertia, inversePrincipal3x3, inverseSymmetric3x3


class TestInverses(unittest.TestCase):

    def test_symmetricInverseRoundTrip(self):
        matrices = [
            np.eye(3),
            np.diag([ 1.0, 2.0, 3.0 ]),
            np.array([[ 4.0, 1.0, 0.5 ], [ 1.0, 3.0, 0.2 ], [ 0.5, 0.2, 2.0 ]]),
            np.array([[ 10.0, -2.0, 1.0 ], [ -2.0, 8.0, -3.0 ], [ 1.0, -3.0, 6.0 ]]),
        ]
        for M in matrices:
            inverse = inverseSymmetric3x3(M)
            assertMatricesAlmostEqual(self, M @ inverse, np.eye(3), 12)
            assertMatricesAlmostEqual(self, inverse @ M, np.eye(3), 12)
            assertMatricesAlmostEqual(self, inverse, np.linalg.inv(M), 12)

    def test_symmetricInverseIsSymmetric(self):
        M = np.array([[ 4.0, 1.0, 0.5 ], [ 1.0, 3.0, 0.2 ], [ 0.5, 0.2, 2.0 ]])
        inverse = inverseSymmetric3x3(M)
        np.testing.assert_array_equal(inverse, inverse.T)

    def test_onlyUpperTriangleRead(self):
        M = np.array([[ 4.0, 1.0, 0.5 ], [ 1.0, 3.0, 0.2 ], [ 0.5, 0.2, 2.0 ]])
        lowerGarbage = M.copy()
        lowerGarbage[1][0] = 100.0
        lowerGarbage[2][0] = -7.0
        lowerGarbage[2][1] = 3.0
        np.testing.assert_array_equal(inverseSymmetric3x3(M), inverseSymmetric3x3(lowerGarbage))

    def test_principalAgreesWithSymmetric(self):
        M = np.diag([ 0.5, 2.0, 8.0 ])
        assertMatricesAlmostEqual(self, inversePrincipal3x3(M), inverseSymmetric3x3(M), 14)
        assertMatricesAlmostEqual(self, inversePrincipal3x3(M), np.diag([ 2.0, 0.5, 0.125 ]), 14)

    def test_principalIgnoresOffDiagonal(self):
        M = np.array([[ 2.0, 5.0, 5.0 ], [ 5.0, 4.0, 5.0 ], [ 5.0, 5.0, 8.0 ]])
        np.testing.assert_array_equal(inversePrincipal3x3(M), np.diag([ 0.5, 0.25, 0.125 ]))

    def test_singularNotDetected(self):
        singular = np.array([[ 1.0, 2.0, 3.0 ], [ 2.0, 4.0, 6.0 ], [ 3.0, 6.0, 9.0 ]])
        inverse = inverseSymmetric3x3(singular)
        self.assertFalse(np.all(np.isfinite(inverse)))

        zeroPrincipal = np.diag([ 1.0, 0.0, 1.0 ])
        self.assertFalse(np.all(np.isfinite(inversePrincipal3x3(zeroPrincipal))))

class TestInertia(unittest.TestCase):

    def test_principalConstructor(self):
        inertia = Inertia(2, (1, 2, 3))
        self.assertEqual(inertia.mass, 2.0)
        np.testing.assert_array_equal(inertia.MOI, np.diag([ 1.0, 2.0, 3.0 ]))

    def test_tensorConstructor(self):
        tensor = [[ 4.0, 1.0, 0.0 ], [ 1.0, 3.0, 0.0 ], [ 0.0, 0.0, 2.0 ]]
        inertia = Inertia(1, tensor)
        np.testing.assert_array_equal(inertia.MOI, np.array(tensor))

    def test_badShape(self):
        with self.assertRaises(ValueError):
            Inertia(1, (1, 2))

    def test_angularMomentumAndEnergy(self):
        inertia = Inertia(1, (1, 2, 3))
        angVel = np.array([ 1.0, 1.0, 1.0 ])
        np.testing.assert_array_equal(inertia.angularMomentum(angVel), [ 1.0, 2.0, 3.0 ])
        self.assertAlmostEqual(inertia.rotationalKineticEnergy(angVel), 3.0)

    def test_equality(self):
        self.assertEqual(Inertia(1, (1, 1, 1)), Inertia(1, np.eye(3)))
        self.assertNotEqual(Inertia(1, (1, 1, 1)), Inertia(2, np.eye(3)))
        self.assertNotEqual(Inertia(1, (1, 1, 1)), "Inertia")

#If this file is run by itself, run the tests above
if __name__ == '__main__':
    unittest.main()
