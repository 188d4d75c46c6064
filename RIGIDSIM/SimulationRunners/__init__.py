'''
Defines functions and classes that manage simulations.
`Simulation` reads a simulation definition, builds the bodies it describes, and runs the fixed-step main loop.
'''

# Make the classes in all submodules importable directly from RIGIDSIM.SimulationRunners
from .SingleSimulations import *

subModules = [ SingleSimulations ]

__all__ = [ ]

for subModule in subModules:
    __all__ += subModule.__all__
