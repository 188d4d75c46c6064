"""
Rigid bodies and their equations of motion.
Contains the logic for calculating rigid body accelerations and state derivatives, given the forces/moments currently applied to a body and its inertia.
"""

import numpy as np

from RIGIDSIM.Motion.inertia import inverseSymmetric3x3
from RIGIDSIM.Motion.RigidBodyStates import RigidBodyState

__all__ = [ "RigidBody", "newtonEulerDynamics", "quaternionDerivative", "rigidBodyStateDerivative" ]

class RigidBody:
    """
        Interface:
            Properties:
                .name
                .inertia = Inertia (mass, MOI)
                .state = RigidBodyState (pos, vel, orientation, angVel)

        Rigid bodies are owned by a `RIGIDSIM.Motion.rigidBodySystem.RigidBodySystem`, which replaces .state once per time step.
        The functions below only read from the bodies they are passed.
    """
    __slots__ = [ "name", "inertia", "state" ]

    def __init__(self, inertia, state=None, name="Body"):
        self.name = name
        self.inertia = inertia
        self.state = RigidBodyState() if state is None else state

    def atState(self, state):
        ''' Returns a copy of this body (same inertia/name) at a different state '''
        return RigidBody(self.inertia, state, self.name)

    def __str__(self):
        return "{}: {}".format(self.name, self.state)

def newtonEulerDynamics(rigidBody, externalForce, externalMoment):
    '''
        Returns (linearAcceleration, angularAcceleration) of rigidBody.

        Translation: a = F / m (global frame)
        Rotation: Euler's equations, in the body frame, with the gyroscopic coupling term:
            alpha = I^-1 * (M - w x (I*w))
        Uses the body's current angular velocity. Position/orientation are not read.
    '''
    mass = rigidBody.inertia.mass
    MOI = rigidBody.inertia.MOI
    angVel = rigidBody.state.angularVelocity

    with np.errstate(divide='ignore', invalid='ignore'):
        linAccel = np.asarray(externalForce, dtype=np.float64) / mass

    angularMomentum = MOI @ angVel
    angularMomentumRate = np.asarray(externalMoment, dtype=np.float64) - np.cross(angVel, angularMomentum)
    angAccel = inverseSymmetric3x3(MOI) @ angularMomentumRate

    return linAccel, angAccel

def quaternionDerivative(orientation, angularVelocity):
    '''
        Time derivative of a scalar-first orientation quaternion, given a body-frame angular velocity:
            dq/dt = 0.5 * q * (0, w)
    '''
    qw, qx, qy, qz = orientation
    wx, wy, wz = angularVelocity

    return 0.5 * np.array([
        -qx*wx - qy*wy - qz*wz,
         qw*wx + qy*wz - qz*wy,
         qw*wy - qx*wz + qz*wx,
         qw*wz + qx*wy - qy*wx
    ])

def rigidBodyStateDerivative(rigidBody, externalForce, externalMoment) -> np.ndarray:
    '''
        Returns the time derivative of rigidBody.state, packed the same way as `RigidBodyState.toArray`:
            [ velocity, linear acceleration, orientation rate, angular acceleration ]
    '''
    state = rigidBody.state
    linAccel, angAccel = newtonEulerDynamics(rigidBody, externalForce, externalMoment)
    orientationRate = quaternionDerivative(state.orientation, state.angularVelocity)

    return np.concatenate((state.velocity, linAccel, orientationRate, angAccel))
