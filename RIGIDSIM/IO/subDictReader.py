'''
    Wrapper class to read from a specific sub-dictionary in a SimDefinition.
'''

from typing import Union

import numpy as np

__all__ = [ "SubDictReader", "parseVector", "parseBool" ]

_trueStrings = { "y", "yes", "t", "true", "on", "1" }
_falseStrings = { "n", "no", "f", "false", "off", "0" }

def parseBool(value: str) -> bool:
    '''
        >>> parseBool("True")
        True
        >>> parseBool("off")
        False
    '''
    lowerValue = value.strip().lower()
    if lowerValue in _trueStrings:
        return True
    elif lowerValue in _falseStrings:
        return False
    else:
        raise ValueError("Invalid truth value: {}".format(value))

def parseVector(value: str) -> np.ndarray:
    '''
        Parses space or comma-separated values, optionally wrapped in parentheses, into a numpy array

        >>> parseVector("(1 2 3)")
        array([1., 2., 3.])
    '''
    components = value.strip().lstrip('(').rstrip(')').replace(',', ' ').split()
    if len(components) == 0:
        raise ValueError("No vector components found in: {}".format(value))
    return np.array([ float(x) for x in components ])

class SubDictReader():

    def __init__(self, stringPathToThisItemsSubDictionary, simDefinition):
        '''
            Example stringPathToThisItemsSubDictionary = 'Bodies.Earth' if we're initializing the rigid body 'Earth'
        '''
        self.simDefDictPathToReadFrom = stringPathToThisItemsSubDictionary
        self.simDefinition = simDefinition

    def getString(self, key):
        '''
            Pass in either relative key or absolute key:
                Ex 1 (Relative): If object subdictionary (self.simDefDictPathToReadFrom) is 'Bodies.Earth', relative keys could be 'mass' or 'position'
                    These would retrieve Bodies.Earth.mass or Bodies.Earth.position from the sim definition
                Ex 2 (Absolute): Can also pass in full absolute key, like 'SimControl.rate', and it will retrieve that value, as long as there isn't a 'path collision' with a relative path
        '''
        try:
            return self.simDefinition.getValue(self.simDefDictPathToReadFrom + "." + key)
        except KeyError:
            try:
                return self.simDefinition.getValue(key)
            except KeyError:
                attemptedKey1 = self.simDefDictPathToReadFrom + "." + key
                attemptedKey2 = key
                raise KeyError("{} and {} not found in {} or in default value dictionary".format(attemptedKey1, attemptedKey2, self.simDefinition.fileName))

    #### Get parsed values ####
    def getInt(self, key: str) -> int:
        return int(self.getString(key))

    def getFloat(self, key: str) -> float:
        return float(self.getString(key))

    def getVector(self, key: str, length: Union[None, int]=None) -> np.ndarray:
        ''' If length is provided, raises a ValueError if the parsed vector has a different number of components '''
        vector = parseVector(self.getString(key))
        if length is not None and len(vector) != length:
            raise ValueError("{}.{} should have {} components, got: {}".format(self.simDefDictPathToReadFrom, key, length, len(vector)))
        return vector

    def getBool(self, key: str) -> bool:
        return parseBool(self.getString(key))

    def getInertiaTensor(self, key: str) -> np.ndarray:
        '''
            Reads a moment of inertia tensor. Accepts either:
                3 values: principal moments of inertia, (Ixx Iyy Izz)
                9 values: full tensor, row-major
        '''
        values = self.getVector(key)
        if len(values) == 3:
            return np.diag(values)
        elif len(values) == 9:
            return values.reshape((3,3))
        else:
            raise ValueError("{}.{} should have 3 (principal) or 9 (full tensor) components, got: {}".format(self.simDefDictPathToReadFrom, key, len(values)))

    def getDictName(self) -> str:
        lastDotIndex = self.simDefDictPathToReadFrom.rfind('.')
        return self.simDefDictPathToReadFrom[lastDotIndex+1:]
