'''
Input/Output functionality:

* Reading Simulation Definition Files
* Capturing simulation output
* Storing simulation results in memory (SimulationHistory)
'''
# Make the classes in all submodules importable directly from RIGIDSIM.IO
from .Logging import *
from .simDefinition import *
from .simulationHistory import *
from .subDictReader import *

subModules = [ Logging, simDefinition, simulationHistory, subDictReader ]

__all__ = []

for subModule in subModules:
    __all__ += subModule.__all__
