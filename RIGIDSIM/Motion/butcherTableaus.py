'''
    Defines the Butcher tableaus that drive the explicit Runge-Kutta integrator in `RIGIDSIM.Motion.Integration`.

    In RIGIDSIM a Butcher tableau is stored as three numpy arrays, for a method with S stages:

         c0 | a00 a01 .. a0(S-1)
         c1 | a10 a11 .. a1(S-1)
         .. |  ..  ..  ..  ..
    c(S-1)  | ..  ..  .. a(S-1)(S-1)
        ----+-----------------------
            |  b0  b1 .. b(S-1)

    For an explicit method, a is strictly lower triangular (a[i][j] == 0 for j >= i), c[0] == 0 and the b's sum to 1.
    The number of stages is independent of the dimension of the state being integrated - that is only known when the integrator is called.

    Learn about Butcher Tableaus here: https://en.wikipedia.org/wiki/Runge%E2%80%93Kutta_methods
        RK4 - 3/8 Butcher Tableau is present there in the Examples section
'''
import math

import numpy as np

__all__ = [ "ButcherTableau", "checkButcherTableau", "getButcherTableau", "availableButcherTableaus" ]

class ButcherTableau():
    ''' Immutable table of explicit Runge-Kutta coefficients '''

    __slots__ = [ "a", "b", "c" ]

    def __init__(self, a, b, c):
        '''
            Inputs:
                a: (S x S nested list or array) stage coefficients
                b: (length S) final combination weights
                c: (length S) fractional time offset of each stage

            Coefficients are not checked here - use `checkButcherTableau`
        '''
        self.a = self._readOnlyArray(a)
        self.b = self._readOnlyArray(b)
        self.c = self._readOnlyArray(c)

    @staticmethod
    def _readOnlyArray(values):
        array = np.array(values, dtype=np.float64)
        array.setflags(write=False)
        return array

    @classmethod
    def fromFractions(cls, aNums, aDens, bNums, bDens, cNums, cDens):
        '''
            Builds a tableau from tables of numerators and denominators, which are divided elementwise.
            Allows coefficients like 1/3 to be written down exactly as they appear in the literature.
            Denominators of zero coefficients must be non-zero (use 1).
        '''
        a = np.asarray(aNums, dtype=np.float64) / np.asarray(aDens, dtype=np.float64)
        b = np.asarray(bNums, dtype=np.float64) / np.asarray(bDens, dtype=np.float64)
        c = np.asarray(cNums, dtype=np.float64) / np.asarray(cDens, dtype=np.float64)
        return cls(a, b, c)

    @property
    def stages(self) -> int:
        return len(self.b)

    def __eq__(self, tableau2):
        try:
            return np.array_equal(self.a, tableau2.a) and np.array_equal(self.b, tableau2.b) and np.array_equal(self.c, tableau2.c)
        except AttributeError:
            return False

    def __repr__(self):
        return "ButcherTableau(a={}, b={}, c={})".format(self.a.tolist(), self.b.tolist(), self.c.tolist())

#### Canonical tableaus ####
def _forwardEuler():
    return ButcherTableau([[ 0.0 ]], [ 1.0 ], [ 0.0 ])

def _midpoint():
    return ButcherTableau(
        [
            [ 0.0, 0.0 ],
            [ 0.5, 0.0 ]
        ],
        [ 0.0, 1.0 ],
        [ 0.0, 0.5 ]
    )

def _heun():
    return ButcherTableau(
        [
            [ 0.0, 0.0 ],
            [ 1.0, 0.0 ]
        ],
        [ 0.5, 0.5 ],
        [ 0.0, 1.0 ]
    )

def _classicalRK4():
    return ButcherTableau.fromFractions(
        aNums=[
            [ 0, 0, 0, 0 ],
            [ 1, 0, 0, 0 ],
            [ 0, 1, 0, 0 ],
            [ 0, 0, 1, 0 ],
        ],
        aDens=[
            [ 1, 1, 1, 1 ],
            [ 2, 1, 1, 1 ],
            [ 1, 2, 1, 1 ],
            [ 1, 1, 1, 1 ],
        ],
        bNums=[ 1, 1, 1, 1 ],
        bDens=[ 6, 3, 3, 6 ],
        cNums=[ 0, 1, 1, 1 ],
        cDens=[ 1, 2, 2, 1 ]
    )

def _threeEighthsRK4():
    return ButcherTableau.fromFractions(
        aNums=[
            [  0,  0, 0, 0 ],
            [  1,  0, 0, 0 ],
            [ -1,  1, 0, 0 ],
            [  1, -1, 1, 0 ],
        ],
        aDens=[
            [ 1, 1, 1, 1 ],
            [ 3, 1, 1, 1 ],
            [ 3, 1, 1, 1 ],
            [ 1, 1, 1, 1 ],
        ],
        bNums=[ 1, 3, 3, 1 ],
        bDens=[ 8, 8, 8, 8 ],
        cNums=[ 0, 1, 2, 1 ],
        cDens=[ 1, 3, 3, 1 ]
    )

_tableauConstructors = {
    "Euler":        _forwardEuler,
    "RK2Midpoint":  _midpoint,
    "RK2Heun":      _heun,
    "RK4":          _classicalRK4,
    "RK4_3/8":      _threeEighthsRK4,
}

def availableButcherTableaus():
    return list(_tableauConstructors.keys())

def getButcherTableau(name: str) -> ButcherTableau:
    ''' Returns a new instance of the named tableau. Names: "Euler", "RK2Midpoint", "RK2Heun", "RK4", "RK4_3/8" '''
    try:
        return _tableauConstructors[name]()
    except KeyError:
        raise ValueError("Integration method: {} not implemented. Options are: {}".format(name, ", ".join(availableButcherTableaus())))

def checkButcherTableau(tableau: ButcherTableau):
    ''' Checks that the Butcher tableau passed in represents a consistent, explicit R-K method. Raises ValueError otherwise '''
    S = tableau.stages

    if tableau.a.shape != (S, S) or tableau.c.shape != (S,):
        raise ValueError("Tableau shapes don't match: a: {}, b: {}, c: {}".format(tableau.a.shape, tableau.b.shape, tableau.c.shape))

    for i in range(S):
        for j in range(i, S):
            if tableau.a[i][j] != 0:
                raise ValueError("Tableau is not explicit: a[{}][{}] = {}".format(i, j, tableau.a[i][j]))

    sumB = math.fsum(tableau.b)
    if not math.isclose(sumB, 1.0):
        raise ValueError("Sum of 'b' coefficients ({}) of butcher tableau don't = 1".format(sumB))

    if S > 0 and tableau.c[0] != 0:
        raise ValueError("First stage must be evaluated at the start of the time step, c[0] = {}".format(tableau.c[0]))

    # Each stage's time offset should match the sum of its 'a' coefficients
    for i in range(S):
        sumA = math.fsum(tableau.a[i])
        if not math.isclose(tableau.c[i], sumA, abs_tol=1e-12):
            raise ValueError("Sum of 'a' coefficients ({}) of butcher tableau row {} don't = 'c' coefficient from the same row {}".format(sumA, i, tableau.c[i]))
