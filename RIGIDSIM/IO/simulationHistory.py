'''
Temporarily holds simulation results.
'''

from typing import List

import numpy as np

__all__ = [ "SimulationHistory" ]

class SimulationHistory():
    ''' Holds simulation results: the simulation time and the state of each body, recorded once per time step '''

    def __init__(self, bodyNames: List[str]):
        self.bodyNames = list(bodyNames)
        self.times = []
        self.rigidBodyStates = { name: [] for name in self.bodyNames }

    def record(self, time, rigidBodies):
        self.times.append(time)
        for body in rigidBodies:
            self.rigidBodyStates[body.name].append(body.state.copy())

    def getSimulationTime(self):
        return self.times[-1]

    def getPositions(self, bodyName) -> np.ndarray:
        ''' Returns an (nTimes, 3) array '''
        return np.array([ state.position for state in self.rigidBodyStates[bodyName] ])

    def getVelocities(self, bodyName) -> np.ndarray:
        return np.array([ state.velocity for state in self.rigidBodyStates[bodyName] ])

    def getSeparations(self, bodyName1, bodyName2) -> np.ndarray:
        ''' Distance between the two bodies at each recorded time '''
        return np.linalg.norm(self.getPositions(bodyName2) - self.getPositions(bodyName1), axis=1)

    def getMaxSpeed(self, bodyName):
        return max(np.linalg.norm(self.getVelocities(bodyName), axis=1))

    def __len__(self):
        return len(self.times)
