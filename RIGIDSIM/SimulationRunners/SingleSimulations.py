import sys

import numpy as np
from tqdm import tqdm

from RIGIDSIM.IO import (Logging, SimDefinition, SimulationHistory,
                         SubDictReader)
from RIGIDSIM.Motion import (Inertia, RigidBody, RigidBodyState,
                             RigidBodySystem, integratorFactory)

__all__ = [ "Simulation", "runSimulation", "loadSimDefinition" ]

def loadSimDefinition(simDefinitionFilePath=None, simDefinition=None, silent=False):
    ''' Loads a simulation definition file into a `RIGIDSIM.IO.SimDefinition` object - accepts either a file path or a `RIGIDSIM.IO.SimDefinition` object as input '''
    if simDefinition is None and simDefinitionFilePath is not None:
        return SimDefinition(simDefinitionFilePath, silent=silent) # Parse simulation definition file

    elif simDefinition is not None:
        return simDefinition # Use the SimDefinition that was passed in

    else:
        raise ValueError(""" Insufficient information to initialize a Simulation.
            Please provide either simDefinitionFilePath (string) or simDefinition (SimDefinition), which has been created from the desired Sim Definition file.
            If both are provided, the SimDefinition is used.""")

class Simulation():

    def __init__(self, simDefinitionFilePath=None, simDefinition=None, silent=False):
        '''
            Inputs:

                * simDefinitionFilePath:  (string) path to simulation definition file
                * simDefinition:          (`RIGIDSIM.IO.SimDefinition`) object that's already loaded and parsed the desired sim definition file
                * silent:                 (bool) toggles optional outputs to the console
        '''
        self.simDefinition = loadSimDefinition(simDefinitionFilePath, simDefinition, silent)
        ''' Instance of `RIGIDSIM.IO.SimDefinition`. Defines the current simulation '''

        self.silent = silent
        ''' (bool) '''

        simControlReader = SubDictReader("SimControl", self.simDefinition)
        self.loggingLevel = simControlReader.getInt("loggingLevel")
        self.showProgress = simControlReader.getBool("showProgress")
        self.endTime = simControlReader.getFloat("endTime")

        rate = simControlReader.getFloat("rate")
        if rate <= 0:
            raise ValueError("SimControl.rate must be positive, got: {}".format(rate))
        self.dt = 1.0 / rate
        ''' (float) Fixed time step size, seconds '''

        self.consoleOutputLog = None
        ''' (list[str]) Captured console output, filled in if loggingLevel > 0 '''

        self.logger = None
        ''' (`RIGIDSIM.IO.Logger`) Replaces sys.stdout while the simulation runs, if output is being captured or silenced '''

    def run(self, rigidBodySystem=None):
        '''
            Runs simulation defined by self.simDefinition (which has parsed a simulation definition file)
            Prints one line per time step: time, followed by the state of each body

            Returns:
                * simulationHistory: (`RIGIDSIM.IO.SimulationHistory`) States of all bodies at each time step
        '''
        if rigidBodySystem is None:
            rigidBodySystem = self.createRigidBodySystem()

        self._setUpConsoleLogging(rigidBodySystem)

        history = SimulationHistory(rigidBodySystem.getBodyNames())
        history.record(rigidBodySystem.time, rigidBodySystem.rigidBodies)

        progressBar = None
        if self.showProgress:
            progressBar = tqdm(total=self.endTime, disable=self.silent, file=sys.__stderr__)

        try:
            #### Main Loop ####
            while True:
                integrationResult = rigidBodySystem.timeStep(self.dt)

                if progressBar is not None:
                    progressBar.update(integrationResult.dt)

                history.record(rigidBodySystem.time, rigidBodySystem.rigidBodies)
                print(rigidBodySystem)

                if rigidBodySystem.time > self.endTime:
                    break
        finally:
            if progressBar is not None:
                progressBar.close()
            if self.logger is not None:
                Logging.removeLogger(self._stdoutBeforeLogging)
                self.logger = None

        return history

    #### Pre-sim ####
    def createBodies(self):
        '''
            Creates one `RIGIDSIM.Motion.RigidBody` for each subdictionary of 'Bodies', in the order they are defined.
            Orientation quaternions are normalized as they are read.
        '''
        bodyDicts = self.simDefinition.getImmediateSubDicts("Bodies")
        if len(bodyDicts) == 0:
            raise ValueError("No rigid bodies defined in {}. Define each body as a subdictionary of 'Bodies'".format(self.simDefinition.fileName))

        bodies = []
        for bodyDict in bodyDicts:
            bodyReader = SubDictReader(bodyDict, self.simDefinition)

            mass = bodyReader.getFloat("mass")
            if mass <= 0:
                raise ValueError("{}.mass must be positive, got: {}".format(bodyDict, mass))
            inertia = Inertia(mass, bodyReader.getInertiaTensor("MOI"))

            orientation = bodyReader.getVector("orientation", 4)
            orientationNorm = np.linalg.norm(orientation)
            if orientationNorm == 0:
                raise ValueError("{}.orientation must be a non-zero quaternion".format(bodyDict))

            state = RigidBodyState(
                bodyReader.getVector("position", 3),
                bodyReader.getVector("velocity", 3),
                orientation / orientationNorm,
                bodyReader.getVector("angularVelocity", 3)
            )
            bodies.append(RigidBody(inertia, state, name=bodyReader.getDictName()))

        return bodies

    def createRigidBodySystem(self):
        ''' Creates the bodies, integrator and gravity model described by self.simDefinition '''
        simControlReader = SubDictReader("SimControl", self.simDefinition)
        integrator = integratorFactory(
            integrationMethod=simControlReader.getString("timeDiscretization"),
            checkFinite=simControlReader.getBool("checkFinite")
        )

        return RigidBodySystem(
            self.createBodies(),
            integrator=integrator,
            gravitationalConstant=float(self.simDefinition.getValue("Environment.gravitationalConstant")),
            integrationScheme=simControlReader.getString("integrationScheme")
        )

    def _setUpConsoleLogging(self, rigidBodySystem):
        self._stdoutBeforeLogging = sys.stdout

        if self.loggingLevel > 0:
            # Set up logging so that the output of any print calls after this point is captured in consoleOutputLog
            self.consoleOutputLog = []
            self.logger = Logging.Logger(self.consoleOutputLog, continueWritingToTerminal=not self.silent)
            sys.stdout = self.logger

            # Output system info to console and to log
            Logging.getSystemInfo(printToConsole=True)
            # Output sim definition to the log only
            self.consoleOutputLog += [ line + "\n" for line in Logging.getSimDefinitionForOutput(self.simDefinition, printToConsole=False) ]

        elif self.silent:
            # Nothing is logged, just prevent output from being printed to the terminal
            self.logger = Logging.Logger([], continueWritingToTerminal=False)
            sys.stdout = self.logger

        # Output header for data outputted to the console during the simulation
        print("Starting Simulation:")
        bodyHeaders = [ RigidBodyState.getLogHeader(name + ".") for name in rigidBodySystem.getBodyNames() ]
        print(" ".join([ "Time(s)" ] + bodyHeaders))

def runSimulation(simDefinitionFilePath=None, simDefinition=None, silent=False):
    ''' Convenience function: creates and runs a `Simulation`, returning its `RIGIDSIM.IO.SimulationHistory` '''
    simRunner = Simulation(simDefinitionFilePath, simDefinition, silent)
    return simRunner.run()
