# Mass properties of a rigid body and the closed-form 3x3 inverses used by the Euler equations

import numpy as np

__all__ = [ "Inertia", "inverseSymmetric3x3", "inversePrincipal3x3" ]

def inverseSymmetric3x3(M):
    '''
        Inverts a symmetric 3x3 matrix by cofactor expansion.
        Only the six independent entries of the upper triangle are read - symmetry is assumed, not checked.
        A singular matrix is not detected: the result will contain infs/nans.
    '''
    m00, m01, m02 = M[0][0], M[0][1], M[0][2]
    m11, m12 = M[1][1], M[1][2]
    m22 = M[2][2]

    den = m00*m11*m22 + 2*m01*m02*m12 - m00*m12**2 - m11*m02**2 - m22*m01**2

    inv00 = m11*m22 - m12**2
    inv11 = m00*m22 - m02**2
    inv22 = m00*m11 - m01**2

    inv01 = m02*m12 - m01*m22
    inv02 = m01*m12 - m02*m11
    inv12 = m01*m02 - m00*m12

    cofactors = np.array([
        [ inv00, inv01, inv02 ],
        [ inv01, inv11, inv12 ],
        [ inv02, inv12, inv22 ]
    ], dtype=np.float64)

    with np.errstate(divide='ignore', invalid='ignore'):
        return cofactors / den

def inversePrincipal3x3(M):
    ''' Inverts a diagonal 3x3 matrix (principal-axis inertia tensor). Off-diagonal entries are ignored, not checked '''
    with np.errstate(divide='ignore'):
        return np.diag(1.0 / np.array([ M[0][0], M[1][1], M[2][2] ], dtype=np.float64))

class Inertia():

    __slots__ = [ "mass", "MOI" ]

    def __init__(self, mass, MOI):
        """
            * mass: (float) kg, expected > 0
            * MOI:  Moment of inertia tensor about the body's CG, in the body frame.
                Either a full symmetric 3x3 matrix, or the three principal moments (Ixx, Iyy, Izz)
        """
        self.mass = float(mass)

        MOI = np.array(MOI, dtype=np.float64)
        if MOI.shape == (3,):
            MOI = np.diag(MOI)
        elif MOI.shape != (3,3):
            raise ValueError("Moment of inertia must be 3 principal moments or a 3x3 tensor, got shape: {}".format(MOI.shape))
        self.MOI = MOI

    def angularMomentum(self, angularVelocity):
        return self.MOI @ angularVelocity

    def rotationalKineticEnergy(self, angularVelocity) -> float:
        return 0.5 * float(np.dot(angularVelocity, self.MOI @ angularVelocity))

    def __eq__(self, inertia2):
        try:
            return self.mass == inertia2.mass and np.array_equal(self.MOI, inertia2.MOI)
        except AttributeError:
            return False

    def __str__(self):
        ''' Get string representation, used by str() and print() '''
        return 'Mass=({}) MOI=({})'.format(self.mass, " ".join(str(x) for x in self.MOI.flatten()))
