'''
A group of rigid bodies interacting through mutual gravity, advanced one time step at a time.

Two integration schemes are available:

* "Coupled": The states of all bodies are packed into a single vector, integrated in one call to the integrator.
    Gravity and accelerations are re-evaluated at every Runge-Kutta stage, so position, velocity, orientation and angular velocity evolve together.
* "Decoupled": Forces and accelerations are evaluated once, at the start of the time step.
    Each part of each body's state is then integrated separately, with its derivative held constant over the step
    (position using the pre-step velocity, velocity using the pre-step acceleration, etc...).
    This is a first-order approximation of the coupled second-order problem, kept to reproduce results from simpler simulators.
'''
from typing import List

import numpy as np

from RIGIDSIM.Motion.ForceModels import (GRAVITATIONAL_CONSTANT,
                                         accumulateGravityForces)
from RIGIDSIM.Motion.Integration import IntegrationResult, integratorFactory
from RIGIDSIM.Motion.RigidBodies import (newtonEulerDynamics,
                                         quaternionDerivative,
                                         rigidBodyStateDerivative)
from RIGIDSIM.Motion.RigidBodyStates import STATE_SIZE, RigidBodyState

__all__ = [ "RigidBodySystem", "integrationSchemes" ]

integrationSchemes = [ "Coupled", "Decoupled" ]

def _constantDerivative(value):
    ''' Returns a derivative function which always returns (a copy of) value '''
    value = np.array(value, dtype=np.float64)
    def derivative(time, state):
        return value.copy()
    return derivative

class RigidBodySystem():
    """
        Interface:
            Properties:
                .rigidBodies = list of RigidBody
                .time = currentSimTime

            Methods:
                .timeStep(deltaT) -> advances all bodies by deltaT
    """

    def __init__(self, rigidBodies, integrator=None, gravitationalConstant=GRAVITATIONAL_CONSTANT, integrationScheme="Coupled", startTime=0.0):
        if len(rigidBodies) == 0:
            raise ValueError("A RigidBodySystem requires at least one rigid body")

        if integrationScheme not in integrationSchemes:
            raise ValueError("Integration scheme: {} not implemented. Options are: {}".format(integrationScheme, integrationSchemes))

        bodyNames = [ body.name for body in rigidBodies ]
        duplicateNames = sorted(set( name for name in bodyNames if bodyNames.count(name) > 1 ))
        if len(duplicateNames) > 0:
            raise ValueError("Rigid body names must be unique, found duplicates: {}. Pass a name to each RigidBody".format(duplicateNames))

        self.rigidBodies = list(rigidBodies)
        self.integrate = integratorFactory() if integrator is None else integrator
        self.gravitationalConstant = gravitationalConstant
        self.integrationScheme = integrationScheme
        self.time = startTime

    #### Coupled integration ####
    def getSystemState(self) -> np.ndarray:
        return np.concatenate([ body.state.toArray() for body in self.rigidBodies ])

    def _bodiesAtSystemState(self, systemState):
        bodies = []
        for i, body in enumerate(self.rigidBodies):
            bodyState = RigidBodyState.fromArray(systemState[i*STATE_SIZE:(i+1)*STATE_SIZE])
            bodies.append(body.atState(bodyState))
        return bodies

    def getSystemStateDerivative(self, time, systemState) -> np.ndarray:
        ''' Derivative function passed to the integrator in coupled mode. Does not modify self '''
        bodies = self._bodiesAtSystemState(systemState)
        forces = accumulateGravityForces(bodies, self.gravitationalConstant)
        derivatives = [ rigidBodyStateDerivative(body, appliedForce.force, appliedForce.moment) for body, appliedForce in zip(bodies, forces) ]
        return np.concatenate(derivatives)

    def _timeStepCoupled(self, deltaT) -> IntegrationResult:
        integrationResult = self.integrate(self.getSystemState(), self.time, self.getSystemStateDerivative, deltaT)

        for body, newBody in zip(self.rigidBodies, self._bodiesAtSystemState(integrationResult.newValue)):
            body.state = newBody.state

        return integrationResult

    #### Decoupled integration ####
    def _timeStepDecoupled(self, deltaT) -> IntegrationResult:
        # All forces are computed from the pre-step states, before any body is moved
        forces = accumulateGravityForces(self.rigidBodies, self.gravitationalConstant)

        newStates = []
        derivativeEstimates = []
        for body, appliedForce in zip(self.rigidBodies, forces):
            state = body.state
            linAccel, angAccel = newtonEulerDynamics(body, appliedForce.force, appliedForce.moment)
            orientationRate = quaternionDerivative(state.orientation, state.angularVelocity)

            position = self.integrate(state.position, self.time, _constantDerivative(state.velocity), deltaT)
            velocity = self.integrate(state.velocity, self.time, _constantDerivative(linAccel), deltaT)
            orientation = self.integrate(state.orientation, self.time, _constantDerivative(orientationRate), deltaT)
            angularVelocity = self.integrate(state.angularVelocity, self.time, _constantDerivative(angAccel), deltaT)

            subResults = [ position, velocity, orientation, angularVelocity ]
            newStates.append(RigidBodyState(*[ result.newValue for result in subResults ]))
            derivativeEstimates += [ result.derivativeEstimate for result in subResults ]

        for body, newState in zip(self.rigidBodies, newStates):
            body.state = newState

        newValue = np.concatenate([ state.toArray() for state in newStates ])
        return IntegrationResult(newValue, position.newTime, deltaT, np.concatenate(derivativeEstimates))

    #### Interface ####
    def timeStep(self, deltaT) -> IntegrationResult:
        if self.integrationScheme == "Coupled":
            integrationResult = self._timeStepCoupled(deltaT)
        else:
            integrationResult = self._timeStepDecoupled(deltaT)

        # This is where the simulation time is kept track of
        self.time = integrationResult.newTime

        return integrationResult

    def getTotalLinearMomentum(self) -> np.ndarray:
        return sum(body.inertia.mass * body.state.velocity for body in self.rigidBodies)

    def getBodyNames(self) -> List[str]:
        return [ body.name for body in self.rigidBodies ]

    def __str__(self):
        ''' One line: time followed by the 12-value state of each body '''
        return " ".join([ repr(float(self.time)) ] + [ str(body.state) for body in self.rigidBodies ])
