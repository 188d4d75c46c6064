'''
Generalized rigid body motion integration functionality.
Main class is `RIGIDSIM.Motion.rigidBodySystem.RigidBodySystem`.
Fundamental data types used throughout the simulator defined in:

* `ButcherTableau` - coefficients of an explicit Runge-Kutta method
* `Inertia` - stores a body's mass and moment of inertia tensor
* `RigidBodyState` - position, velocity, orientation and angular velocity of a body
* `ForceMomentSystem` - stores a force-moment pair applied to a body

Constant time stepping explicit Runge-Kutta integration is defined in `Integration`
Newton-Euler dynamics are defined in `RigidBodies`, gravity in `ForceModels`
'''
# Make the classes in all submodules importable directly from RIGIDSIM.Motion
from .butcherTableaus import *
from .Integration import *
from .inertia import *
from .RigidBodyStates import *
from .ForceModels import *
from .RigidBodies import *
from .rigidBodySystem import *

subModules = [ butcherTableaus, Integration, inertia, RigidBodyStates, ForceModels, RigidBodies, rigidBodySystem ]

__all__ = []

for subModule in subModules:
    __all__ += subModule.__all__
