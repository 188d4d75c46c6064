'''
Forces acting between rigid bodies.
`newtonianGravity` computes the force on one body of a pair. `accumulateGravityForces` applies it to every pair of bodies in a list.
'''

from typing import List

import numpy as np

__all__ = [ "GRAVITATIONAL_CONSTANT", "ForceMomentSystem", "newtonianGravity", "accumulateGravityForces" ]

GRAVITATIONAL_CONSTANT = 6.67430e-11 # m^3 kg^-1 s^-2

class ForceMomentSystem():
    '''
        Defines a force-moment pair applied at a body's CG.
        Force is defined in the global frame, moment in the body frame.
    '''
    __slots__ = [ "force", "moment" ]

    def __init__(self, force=None, moment=None):
        # Avoids using mutable default values
        if force is None:
            force = np.zeros(3)
        self.force = np.asarray(force, dtype=np.float64)

        if moment is None:
            moment = np.zeros(3)
        self.moment = np.asarray(moment, dtype=np.float64)

    def __add__(self, force2):
        return ForceMomentSystem(self.force + force2.force, self.moment + force2.moment)

    def __neg__(self):
        return ForceMomentSystem(-self.force, -self.moment)

    def __sub__(self, force2):
        return self + (-force2)

    def __eq__(self, force2):
        try:
            return np.array_equal(self.force, force2.force) and np.array_equal(self.moment, force2.moment)
        except AttributeError:
            return False

    def __str__(self):
        return "Force=({}) Moment=({})".format(" ".join(str(x) for x in self.force), " ".join(str(x) for x in self.moment))

def newtonianGravity(rigidBody1, rigidBody2, gravitationalConstant=GRAVITATIONAL_CONSTANT):
    '''
        Returns the gravitational force applied to rigidBody1 by rigidBody2 (points from body 1 towards body 2).
        The force on rigidBody2 is the negative of the returned value - applying it is up to the caller.
        Undefined (nan) if the bodies are at the same location.
    '''
    m1 = rigidBody1.inertia.mass
    m2 = rigidBody2.inertia.mass

    r12 = rigidBody2.state.position - rigidBody1.state.position
    r12NormSquared = np.dot(r12, r12)

    with np.errstate(divide='ignore', invalid='ignore'):
        r12Unit = r12 / np.sqrt(r12NormSquared)
        return gravitationalConstant * m1 * m2 / r12NormSquared * r12Unit

def accumulateGravityForces(rigidBodies, gravitationalConstant=GRAVITATIONAL_CONSTANT) -> List[ForceMomentSystem]:
    '''
        Sums the mutual gravitational attraction of all bodies.
        Each pair is evaluated once, body i receives F and body j receives -F.

        Returns a list of ForceMomentSystems, one per body, in the same order as rigidBodies
    '''
    totalForces = [ ForceMomentSystem() for _ in rigidBodies ]

    for i in range(len(rigidBodies)):
        for j in range(i+1, len(rigidBodies)):
            gravityOnI = ForceMomentSystem(newtonianGravity(rigidBodies[i], rigidBodies[j], gravitationalConstant))
            totalForces[i] = totalForces[i] + gravityOnI
            totalForces[j] = totalForces[j] - gravityOnI

    return totalForces
