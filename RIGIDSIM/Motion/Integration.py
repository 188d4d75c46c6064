'''
    Defines the constant time step explicit Runge-Kutta integrator. Used by `RIGIDSIM.Motion.rigidBodySystem.RigidBodySystem` to integrate body motion

    `advance` is the stepper itself: a pure function of (time, state, derivative function, time step, tableau).
    `ClassicalIntegrator` wraps it in a callable object, which can be called like a function once instantiated
        This is facilitated by its __call__ method

    The tableau fixes the number of stages (S), the state passed in fixes the dimension (N). Neither is hard-coded here.
    The method's coefficients are defined in `RIGIDSIM.Motion.butcherTableaus`
'''
from typing import Callable, Tuple

import numpy as np

from RIGIDSIM.Motion.butcherTableaus import (ButcherTableau,
                                             checkButcherTableau,
                                             getButcherTableau)

__all__ = [ "advance", "integratorFactory", "ClassicalIntegrator", "IntegrationResult", "NonFiniteStateError" ]

def advance(t: float, y, f: Callable, h: float, tableau: ButcherTableau) -> Tuple[float, np.ndarray]:
    '''
        Advances y(t) to y(t+h) using the explicit Runge-Kutta method defined by tableau

        For stage s = 0..S-1 (in order):
            ks = f(t + cs*h, y + h*(as0*k0 + as1*k1 + ... + as(s-1)*k(s-1)))
        Then:
            y(t+h) = y + h*(b0*k0 + b1*k1 + ... + b(S-1)*k(S-1))

        Inputs:
            t:          (float) current time
            y:          (array-like, any shape) current state
            f:          (callable) derivative function f(time, state) -> d(state)/dt, same shape as state
                            Called S times, expected to be free of side effects
            h:          (float) time step
            tableau:    (`ButcherTableau`) trusted as given, not checked

        Returns:
            (t + h, y(t+h))

        Further explanation: https://en.wikipedia.org/wiki/Runge%E2%80%93Kutta_methods#Use
    '''
    y = np.asarray(y, dtype=np.float64)
    a, b, c = tableau.a, tableau.b, tableau.c

    k = []
    for s in range(tableau.stages):
        # Summed left to right in stage order. Non-finite stages propagate without warnings
        with np.errstate(invalid='ignore', over='ignore'):
            sumAK = np.zeros_like(y)
            for j in range(s):
                sumAK = sumAK + a[s][j] * k[j]

            stageTime = t + h * c[s]
            stageY = y + h * sumAK

        k.append(np.asarray(f(stageTime, stageY), dtype=np.float64))

    with np.errstate(invalid='ignore', over='ignore'):
        sumBK = np.zeros_like(y)
        for s in range(tableau.stages):
            sumBK = sumBK + b[s] * k[s]

        return t + h, y + h * sumBK

class NonFiniteStateError(ValueError):
    ''' Raised by integrators running with checkFinite=True when a time step produces a NaN or Inf '''
    pass

class IntegrationResult():
    __slots__ = [ 'newValue', 'newTime', 'dt', 'derivativeEstimate' ]

    def __init__(self, newValue, newTime, dt, derivativeEstimate):
        '''
            newValue:               Value of quantity represented by initVal at time initTime+dt
            newTime:                initTime+dt
            dt:                     The size of the time step taken
            derivativeEstimate:     Average derivative over the time step (b-weighted sum of the stage derivatives)
        '''
        self.newValue = newValue
        self.newTime = newTime
        self.dt = dt
        self.derivativeEstimate = derivativeEstimate

def integratorFactory(integrationMethod="RK4", checkFinite=False):
    '''
        Returns a callable integrator object

        Inputs:
            * integrationMethod: (str) Name of integration method: Examples = "Euler", "RK2Heun", "RK4", "RK4_3/8"
                or (`ButcherTableau`) to integrate with a custom method
            * checkFinite: (bool) if True, raise NonFiniteStateError when a time step produces a non-finite result
    '''
    return ClassicalIntegrator(method=integrationMethod, checkFinite=checkFinite)

class ClassicalIntegrator():
    ''' Callable class for constant-dt explicit Runge-Kutta ODE integration '''

    def __init__(self, method="RK4", checkFinite=False):
        if isinstance(method, ButcherTableau):
            self.method = "Custom"
            self.tableau = method
        else:
            self.method = method
            self.tableau = getButcherTableau(method)

        # Once, at setup - the stepper itself never checks its tableau
        checkButcherTableau(self.tableau)

        self.checkFinite = checkFinite

    def __call__(self, initVal, initTime, derivativeFunc, dt) -> IntegrationResult:
        newTime, newValue = advance(initTime, initVal, derivativeFunc, dt, self.tableau)

        if self.checkFinite and not np.all(np.isfinite(newValue)):
            raise NonFiniteStateError("{} time step from t={} to t={} produced a non-finite state: {}".format(self.method, initTime, newTime, newValue))

        derivativeEstimate = (newValue - np.asarray(initVal, dtype=np.float64)) / dt
        return IntegrationResult(newValue, newTime, dt, derivativeEstimate)

    @property
    def nStages(self) -> int:
        return self.tableau.stages
