import unittest
from test.testUtilities import (assertIterablesAlmostEqual, captureOutput,
                                restoreStdout, setUpSimDefForMinimalRunCheck)

import numpy as np

from RIGIDSIM.IO import SimDefinition
from RIGIDSIM.Main import findSimDefinitionFile
from RIGIDSIM.Motion import NonFiniteStateError
from RIGIDSIM.SimulationRunners import (Simulation, loadSimDefinition,
                                        runSimulation)


class TestSimulation(unittest.TestCase):

    def setUp(self):
        self.simDef = SimDefinition(findSimDefinitionFile("TwoBodyGravity"), silent=True)
        setUpSimDefForMinimalRunCheck(self.simDef)

    def test_loadSimDefinition(self):
        self.assertIs(loadSimDefinition(simDefinition=self.simDef), self.simDef)
        with self.assertRaises(ValueError):
            loadSimDefinition()
        with self.assertRaises(ValueError):
            Simulation()

    def test_createBodies(self):
        bodies = Simulation(simDefinition=self.simDef, silent=True).createBodies()

        self.assertEqual([ body.name for body in bodies ], [ "Body1", "Body2" ])
        assertIterablesAlmostEqual(self, bodies[0].state.position, [ -1, 0, 0 ])
        assertIterablesAlmostEqual(self, bodies[1].state.position, [ 1, 0, 0 ])
        self.assertEqual(bodies[1].inertia.mass, 1.0)
        np.testing.assert_array_equal(bodies[1].inertia.MOI, np.eye(3))

    def test_orientationNormalized(self):
        self.simDef.setValue("Bodies.Body1.orientation", "(2 0 0 0)")
        bodies = Simulation(simDefinition=self.simDef, silent=True).createBodies()
        assertIterablesAlmostEqual(self, bodies[0].state.orientation, [ 1, 0, 0, 0 ])

        self.simDef.setValue("Bodies.Body1.orientation", "(0 0 0 0)")
        with self.assertRaises(ValueError):
            Simulation(simDefinition=self.simDef, silent=True).createBodies()

    def test_badBodyDefinitions(self):
        self.simDef.setValue("Bodies.Body1.mass", "-1")
        with self.assertRaises(ValueError):
            Simulation(simDefinition=self.simDef, silent=True).createBodies()

        noBodies = SimDefinition(dictionary={ "SimControl.rate": "100" }, silent=True)
        with self.assertRaises(ValueError):
            Simulation(simDefinition=noBodies, silent=True).createBodies()

    def test_badSimControl(self):
        self.simDef.setValue("SimControl.rate", "0")
        with self.assertRaises(ValueError):
            Simulation(simDefinition=self.simDef, silent=True)

        self.simDef.setValue("SimControl.rate", "100")
        self.simDef.setValue("SimControl.integrationScheme", "Implicit")
        with self.assertRaises(ValueError):
            Simulation(simDefinition=self.simDef, silent=True).createRigidBodySystem()

        self.simDef.setValue("SimControl.integrationScheme", "Coupled")
        self.simDef.setValue("SimControl.timeDiscretization", "RK45Adaptive")
        with self.assertRaises(ValueError):
            Simulation(simDefinition=self.simDef, silent=True).createRigidBodySystem()

    def test_createRigidBodySystem(self):
        self.simDef.setValue("SimControl.timeDiscretization", "Euler")
        self.simDef.setValue("SimControl.integrationScheme", "Decoupled")
        self.simDef.setValue("Environment.gravitationalConstant", "2.5")
        system = Simulation(simDefinition=self.simDef, silent=True).createRigidBodySystem()

        self.assertEqual(system.integrate.method, "Euler")
        self.assertEqual(system.integrationScheme, "Decoupled")
        self.assertEqual(system.gravitationalConstant, 2.5)
        self.assertEqual(len(system.rigidBodies), 2)

    def test_outputFormat(self):
        with captureOutput() as (out, err):
            history = Simulation(simDefinition=self.simDef).run()

        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "Starting Simulation:")
        self.assertEqual(len(lines[1].split()), 1 + 2*12)

        dataLines = lines[2:]
        self.assertEqual(len(dataLines), len(history) - 1)
        for line in dataLines:
            values = [ float(x) for x in line.split() ]
            self.assertEqual(len(values), 1 + 2*12)

        times = [ float(line.split()[0]) for line in dataLines ]
        self.assertAlmostEqual(times[0], 0.01)
        # Stops after the first step past the end time
        self.assertGreater(times[-1], 0.05)
        self.assertLess(times[-2], 0.05 + 1e-9)

        # Orientation columns of the identity quaternion: w x y
        firstBodyValues = dataLines[0].split()[1:13]
        self.assertEqual([ float(x) for x in firstBodyValues[6:9] ], [ 1.0, 0.0, 0.0 ])

    def test_twoBodyGravity(self):
        self.simDef.setValue("Environment.gravitationalConstant", "1")
        self.simDef.setValue("SimControl.endTime", "0.5")

        for scheme in [ "Coupled", "Decoupled" ]:
            self.simDef.setValue("SimControl.integrationScheme", scheme)
            history = Simulation(simDefinition=self.simDef, silent=True).run()

            separations = history.getSeparations("Body1", "Body2")
            self.assertEqual(separations[0], 2.0)
            self.assertTrue(np.all(np.diff(separations) <= 0))
            self.assertLess(separations[-1], 2.0)

            totalMomentum = history.getVelocities("Body1")[-1] + history.getVelocities("Body2")[-1]
            assertIterablesAlmostEqual(self, totalMomentum, [ 0, 0, 0 ], 12)

    def test_consoleLogging(self):
        self.simDef.setValue("SimControl.loggingLevel", "1")
        simRunner = Simulation(simDefinition=self.simDef, silent=True)

        with restoreStdout():
            simRunner.run()
            self.assertIsNone(simRunner.logger)

        log = "".join(simRunner.consoleOutputLog)
        self.assertIn("# RIGIDSIM", log)
        self.assertIn("SimControl.endTime: 0.05", log)
        self.assertIn("Starting Simulation:", log)

        dataLines = [ line for line in log.splitlines() if line.startswith("0.") ]
        self.assertGreaterEqual(len(dataLines), 5)

    def test_progressBar(self):
        self.simDef.setValue("SimControl.showProgress", "True")
        history = runSimulation(simDefinition=self.simDef, silent=True)
        self.assertGreater(history.getSimulationTime(), 0.05)

    def test_checkFinite(self):
        # Coincident bodies: gravity is undefined
        self.simDef.setValue("Bodies.Body2.position", "(-1 0 0)")
        self.simDef.setValue("SimControl.checkFinite", "True")
        simRunner = Simulation(simDefinition=self.simDef, silent=True)

        with restoreStdout():
            with self.assertRaises(NonFiniteStateError):
                simRunner.run()
            # Logger removed even though the simulation crashed
            self.assertIsNone(simRunner.logger)

    def test_nonFiniteStatesPropagateByDefault(self):
        self.simDef.setValue("Bodies.Body2.position", "(-1 0 0)")
        history = Simulation(simDefinition=self.simDef, silent=True).run()
        self.assertTrue(np.all(np.isnan(history.getPositions("Body1")[-1])))

#If this file is run by itself, run the tests above
if __name__ == '__main__':
    unittest.main()
