import unittest

import numpy as np

from RIGIDSIM.Motion import STATE_SIZE, RigidBodyState


class TestRigidBodyState(unittest.TestCase):

    def setUp(self):
        self.state = RigidBodyState((1, 2, 3), (4, 5, 6), (0.5, 0.5, 0.5, 0.5), (7, 8, 9))

    def test_defaults(self):
        state = RigidBodyState()
        np.testing.assert_array_equal(state.position, [ 0, 0, 0 ])
        np.testing.assert_array_equal(state.orientation, [ 1, 0, 0, 0 ])

    def test_toArray(self):
        array = self.state.toArray()
        self.assertEqual(len(array), STATE_SIZE)
        np.testing.assert_array_equal(array, [ 1, 2, 3, 4, 5, 6, 0.5, 0.5, 0.5, 0.5, 7, 8, 9 ])

    def test_fromArray(self):
        array = self.state.toArray()
        state2 = RigidBodyState.fromArray(array)
        self.assertEqual(state2, self.state)

        # Components are copies
        array[0] = 100
        self.assertEqual(state2.position[0], 1)

    def test_copy(self):
        state2 = self.state.copy()
        self.assertEqual(state2, self.state)
        state2.velocity[0] = -1
        self.assertEqual(self.state.velocity[0], 4)

    def test_componentLengths(self):
        with self.assertRaises(ValueError):
            RigidBodyState(position=(1, 2))
        with self.assertRaises(ValueError):
            RigidBodyState(orientation=(1, 0, 0))

    def test_equality(self):
        self.assertNotEqual(self.state, RigidBodyState())
        self.assertNotEqual(self.state, "state")

    def test_str(self):
        values = str(self.state).split()
        self.assertEqual(len(values), 12)
        # Orientation columns are the first three quaternion components
        self.assertEqual([ float(x) for x in values ], [ 1, 2, 3, 4, 5, 6, 0.5, 0.5, 0.5, 7, 8, 9 ])

    def test_logHeader(self):
        header = RigidBodyState.getLogHeader("Moon.").split()
        self.assertEqual(len(header), 12)
        self.assertEqual(header[0], "Moon.PositionX(m)")

#If this file is run by itself, run the tests above
if __name__ == '__main__':
    unittest.main()
