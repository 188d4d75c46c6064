'''
RIGIDSIM - rigid body motion under mutual Newtonian gravity, integrated with generic explicit Runge-Kutta methods.

Simulation entry point: `RIGIDSIM.Main.main`.
`RIGIDSIM.Main.main` will initialize a `RIGIDSIM.SimulationRunners.Simulation` to drive/manage the simulation.
The simulation runner creates a `RIGIDSIM.Motion.RigidBodySystem`, which owns the bodies and advances them one tick at a time.

Packages:

* `RIGIDSIM.Motion` - Butcher tableaus, the Runge-Kutta stepper, inertia, rigid body dynamics and gravity
* `RIGIDSIM.IO` - Reading simulation definition (.rigidsim) files, console logging
* `RIGIDSIM.SimulationRunners` - The outer time stepping loop

See `RIGIDSIM/Examples/Simulations/TwoBodyGravity.rigidsim` for an example simulation definition
'''

__version__ = "0.1.0"

__pdoc__ = {
    'Examples': False
}
