'''
Define the rigid body state.
For the purposes of Runge-Kutta motion integration, states are packed into / unpacked from flat numpy arrays, so the integrator only ever sees plain vectors.
'''

import numpy as np

__all__ = [ "RigidBodyState", "STATE_SIZE" ]

STATE_SIZE = 13
''' Number of scalars in a packed RigidBodyState: position (3), velocity (3), orientation (4), angular velocity (3) '''

def _vector(values, length):
    vector = np.array(values, dtype=np.float64)
    if vector.shape != (length,):
        raise ValueError("Expected {} components, got: {}".format(length, values))
    return vector

class RigidBodyState():
    """
        Pos/Vel are expected to be 3-component arrays - Defined with reference to the global frame
        Orientation is a scalar-first quaternion (w, x, y, z) - Defines the rotation from the global frame to the body's local frame.
            Its magnitude is not enforced here
        Angular Velocity is a 3-component array - Defined with reference to the local (body) frame
    """
    __slots__ = [ "position", "velocity", "orientation", "angularVelocity" ]

    def __init__(self, position=(0,0,0), velocity=(0,0,0), orientation=(1,0,0,0), angularVelocity=(0,0,0)):
        self.position = _vector(position, 3)
        self.velocity = _vector(velocity, 3)
        self.orientation = _vector(orientation, 4)
        self.angularVelocity = _vector(angularVelocity, 3)

    def toArray(self) -> np.ndarray:
        return np.concatenate((self.position, self.velocity, self.orientation, self.angularVelocity))

    @classmethod
    def fromArray(cls, array):
        ''' Inverse of toArray. Components are copied '''
        return cls(array[0:3], array[3:6], array[6:10], array[10:13])

    def copy(self):
        return RigidBodyState(self.position, self.velocity, self.orientation, self.angularVelocity)

    def __eq__(self, state2):
        try:
            return np.array_equal(self.toArray(), state2.toArray())
        except AttributeError:
            return False

    ### String Functions ###
    @staticmethod
    def getLogHeader(bodyName=""):
        columns = [ "PositionX(m)", "PositionY(m)", "PositionZ(m)",
            "VelocityX(m/s)", "VelocityY(m/s)", "VelocityZ(m/s)",
            "OrientationQuat0", "OrientationQuat1", "OrientationQuat2",
            "AngularVelocityX(rad/s)", "AngularVelocityY(rad/s)", "AngularVelocityZ(rad/s)" ]
        return " ".join(bodyName + column for column in columns)

    def __str__(self):
        ''' Called by print function. 12 space-separated values: position, velocity, first three orientation components, angular velocity '''
        values = np.concatenate((self.position, self.velocity, self.orientation[:3], self.angularVelocity))
        return " ".join(repr(float(x)) for x in values)
