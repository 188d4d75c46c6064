'''
Contains a class meant to read and modify simulation definition (.rigidsim) files, the master dictionary of
default values for simulation definitions, and a few utility functions for working with string dictionary keys
'''
import re
import shlex
from typing import Dict, List, Tuple, Union

__all__ = [ "defaultConfigValues", "SimDefinition" ]

#################### Default value dictionary  #########################
defaultConfigValues = {
    "SimControl.timeDiscretization":            "RK4",
    "SimControl.integrationScheme":             "Coupled",
    "SimControl.rate":                          "100",
    "SimControl.endTime":                       "30",
    "SimControl.checkFinite":                   "False",
    "SimControl.loggingLevel":                  "1",
    "SimControl.showProgress":                  "False",

    "Environment.gravitationalConstant":        "6.67430e-11",

    # Class-based defaults - apply to any dictionary containing 'class RigidBody'
    "RigidBody.MOI":                            "(1 1 1)",
    "RigidBody.position":                       "(0 0 0)",
    "RigidBody.velocity":                       "(0 0 0)",
    "RigidBody.orientation":                    "(1 0 0 0)",
    "RigidBody.angularVelocity":                "(0 0 0)",
}

simDefinitionHelpMessage = \
"""
    All non-empty, non-comment lines are expected to end in either:
    {   (dictionary start)
    }   (dictionary end)

    Or to contain a space-separated key-value pair:
    key value
"""

class SimDefinition():

    #### Parsing / Initialization ####
    def __init__(self, fileName=None, dictionary=None, silent=False, defaultDict=None):
        '''
            Parse simulation definition files into a dictionary of string values accessible by string keys.

            Inputs:
                * fileName: (str) path to simulation definition file
                * dictionary: (dict[str,str]) if not providing a fileName, provide a pre-parsed dictionary equivalent to a simulation definition file
                * silent: (bool) Console output control
                * defaultDict: (dict[str,str]) provide a custom dictionary of default values. If none is provided, defaultConfigValues is used.

            Example:
                The file contents:
                    'SimControl{
                        &nbsp;&nbsp;&nbsp;&nbsp;timeDiscretization RK4
                    }'
                Would be parsed into a single-key Python dictionary, stored in self.dict:
                `{ "SimControl.timeDiscretization": "RK4"}`
        '''
        self.silent = silent
        self.fileName = fileName

        self.defaultDict = defaultConfigValues if defaultDict is None else defaultDict
        ''' Fills in for missing values in self.dict '''

        if fileName is not None:
            self.dict = {} # type: Dict[str,str]
            self._parseSimDefinitionFile(fileName)
        elif dictionary is not None:
            self.dict = dictionary
        else:
            raise ValueError("No fileName or dictionary provided to initialize the SimDefinition")

        self._resetUsedAndUnusedKeyTrackers()

    def _parseSimDefinitionFile(self, fileName):
        with open(fileName, "r") as file:
            workingText = file.read()

        # Remove comments and blank lines
        workingText = re.sub("#.*", "", workingText)
        lines = [ line for line in workingText.split('\n') if line.strip() != '' ]

        # Parse root-level dictionary, which recursively parses all the others
        self._parseDictionaryContents(lines, 0, "")

    def _parseDictionaryContents(self, lines, startLine, currDictName, allowKeyOverwriting=False) -> int:
        '''
            Parses one (sub)dictionary, starting at lines[startLine], and calls itself to parse nested dictionaries.
            Saves key-value pairs to self.dict

            Returns index of the line closing the dictionary
        '''
        i = startLine

        while i < len(lines):
            line = lines[i].strip()

            if line.split()[0] == "!create":
                i = self._parseDerivedDictionary(lines, i, currDictName)

            elif line[-1] == '{':
                subDictName = _joinKey(currDictName, line[:-1].strip())
                i = self._parseDictionaryContents(lines, i+1, subDictName, allowKeyOverwriting)

            elif line == '}':
                return i

            elif len(line.split()) > 1:
                key, value = line.split(maxsplit=1)
                keyString = _joinKey(currDictName, key)

                if keyString in self.dict and not allowKeyOverwriting:
                    raise ValueError("Duplicate Key: {} in File: {}".format(keyString, self.fileName))
                self.dict[keyString] = value.strip()

            else:
                if not self.silent:
                    print(simDefinitionHelpMessage)
                raise ValueError("Problem reading line {}".format(line))

            i += 1

        return i

    def _parseDerivedDictionary(self, lines, initializationLine, currDictName) -> int:
        '''
            Parse a dictionary derived from an existing one, defined with the !create command:
                !create Moon from Bodies.Earth{
                    !replace "Earth" "Moon"
                    mass 7.3e22
                }
            Keys are copied from the parent dictionary, modified by any !replace / !removeKeysContaining commands,
            and can then be overridden by regular key-value pairs.

            Returns index of the last line in the derived dictionary
        '''
        definitionLine = lines[initializationLine].strip().rstrip("{").split()
        derivedDictName = _joinKey(currDictName, definitionLine[1])
        parentDictName = definitionLine[-1]

        parentKeys = self.getSubKeys(parentDictName)
        if len(parentKeys) == 0:
            raise ValueError("Dictionary to derive from: {} is not defined before {} in {}".format(parentDictName, derivedDictName, self.fileName))

        derivedDict = { derivedDictName + key[len(parentDictName):]: self.dict[key] for key in parentKeys }

        i = initializationLine + 1
        while i < len(lines):
            command = shlex.split(lines[i])

            if command[0] == "!replace":
                toReplace, replaceWith = command[1], command[-1]
                derivedDict = { key.replace(toReplace, replaceWith): value.replace(toReplace, replaceWith) for key, value in derivedDict.items() }

            elif command[0] == "!removeKeysContaining":
                derivedDict = { key: value for key, value in derivedDict.items() if command[1] not in key }

            elif command[0][0] != "!":
                break

            else:
                raise ValueError("Command: {} not implemented. Try using !replace or !removeKeysContaining".format(command[0]))

            i += 1

        for key in derivedDict:
            if key in self.dict:
                raise ValueError("Derived dict key {} already exists in {}".format(key, self.fileName))
            self.dict[key] = derivedDict[key]

        # Regular key-value pairs in the derived dict override the copied ones
        return self._parseDictionaryContents(lines, i, derivedDictName, allowKeyOverwriting=True)

    #### Normal Usage ####
    def getValue(self, key: str) -> str:
        """
            Input:
                Key should be a string of format "DictionaryName.SubdictionaryName.Key"
            Output:
                Always returns a string value
                Falls back to the default value dictionary, then to class-based default values, if key is not present in the current SimDefinition
                Raises KeyError if no value is found
        """
        key = key.strip()

        if key in self.dict:
            self.unaccessedFields.discard(key)
            return self.dict[key]

        if key in self.defaultDict:
            self.defaultValuesUsed.add(key)
            return self.defaultDict[key]

        classBasedDefaultValue = self._getClassBasedDefaultValue(key)
        if classBasedDefaultValue is not None:
            return classBasedDefaultValue

        raise KeyError("Key: {} not found in {} or default config values".format(key, self.fileName))

    def setValue(self, key: str, value) -> None:
        ''' Will add the entry if it's not present '''
        self.dict[key.strip()] = value

    def _getClassBasedDefaultValue(self, key: str) -> Union[str, None]:
        '''
            Returns class-based default value from self.defaultDict if it exists. Otherwise returns None

            Checks every prefix of the key, from longest to shortest, for a class definition:
                key = "Bodies.Moon.velocity"
                Attempt1 = "Bodies.Moon.class" -> RigidBody -> look up 'RigidBody.velocity' in defaultDict
        '''
        splitLevel = getKeyLevel(key) - 1

        while splitLevel >= 0:
            prefix, suffix = splitKeyAtLevel(key, splitLevel)
            classKey = prefix + ".class"

            if classKey in self.dict:
                # As soon as we arrive at an item with a class, search terminates
                classBasedDefaultKey = self.dict[classKey] + "." + suffix
                if classBasedDefaultKey not in self.defaultDict:
                    return None

                self.defaultValuesUsed.add(classBasedDefaultKey)
                self.unaccessedFields.discard(classKey)
                return self.defaultDict[classBasedDefaultKey]

            splitLevel -= 1

        return None

    #### Introspection / Key Gymnastics ####
    def getSubKeys(self, key: str) -> List[str]:
        '''
            Returns a list of all keys that are children of key

            ## Example
                getSubKeys("Bodies") ->
                [ "Bodies.Earth.mass", "Bodies.Earth.position", "Bodies.Moon.mass", etc... ]
        '''
        return [ currentKey for currentKey in self.dict.keys() if isSubKey(key, currentKey) ]

    def getImmediateSubDicts(self, key: str) -> List[str]:
        '''
            Returns list of names of immediate subdictionaries, in the order they were defined

            ## Example
                getImmediateSubDicts("Bodies") ->
                [ "Bodies.Earth", "Bodies.Moon" ]
        '''
        keyLevel = getKeyLevel(key)

        subDictionaries = []
        for subKey in self.getSubKeys(key):
            if getKeyLevel(subKey) - keyLevel > 1:
                # A key inside a subdictionary is at least two levels below key
                subDictKey = getParentKeyAtLevel(subKey, keyLevel+1)
                if subDictKey not in subDictionaries:
                    subDictionaries.append(subDictKey)

        return subDictionaries

    #### Usage Reporting ####
    def printUnusedKeys(self):
        ''' Prints a list of keys that were loaded from the simulation definition but never accessed '''
        if len(self.unaccessedFields) > 0:
            print("\nWarning: The following keys were loaded from: {} but never accessed:".format(self.fileName))
            for key in sorted(self.unaccessedFields):
                print("{:<45}{}".format(key+":", self.dict[key]))
            print("")

    def printDefaultValuesUsed(self):
        ''' Prints the default values that have been used since this SimDefinition was created '''
        if len(self.defaultValuesUsed) > 0:
            print("\nThe following default values were used in this simulation:")
            for key in sorted(self.defaultValuesUsed):
                print("{:<45}{}".format(key+":", self.defaultDict[key]))
            print("")

    def _resetUsedAndUnusedKeyTrackers(self):
        self.unaccessedFields = set(self.dict.keys())
        self.defaultValuesUsed = set()

    #### Utilities ####
    def __str__(self):
        result = "File: {}\n".format(self.fileName)
        for key, value in self.dict.items():
            result += "{}: {}\n".format(key, value)
        return result + "\n"

    def __eq__(self, simDef2):
        try:
            return self.dict == simDef2.dict
        except AttributeError:
            return False

################### Functions for dealing with string keys ########################
def _joinKey(parent: str, child: str) -> str:
    return child if parent == "" else parent + "." + child

def isSubKey(potentialParent: str, potentialChild: str) -> bool:
    """
        >>> isSubKey("Bodies", "Bodies.Earth.mass")
        True
        >>> isSubKey("Bodies.Earth", "Bodies.EarthMoonBarycenter.mass")
        False
        >>> isSubKey("", "SimControl.rate")
        True
    """
    if potentialParent == "":
        return potentialChild != ""
    return potentialChild.startswith(potentialParent + ".")

def getKeyLevel(key: str) -> int:
    """
        Counts the number of dots in the key
        >>> getKeyLevel("")
        -1
        >>> getKeyLevel("Bodies")
        0
        >>> getKeyLevel("Bodies.Earth.mass")
        2
    """
    if len(key) == 0:
        return -1
    return key.count('.')

def getParentKeyAtLevel(key: str, desiredLevel: int) -> str:
    """
        >>> getParentKeyAtLevel('Bodies.Earth.mass', 0)
        'Bodies'
        >>> getParentKeyAtLevel('Bodies.Earth.mass', 1)
        'Bodies.Earth'
    """
    return '.'.join(key.split('.')[0:desiredLevel+1])

def splitKeyAtLevel(key: str, prefixLevel: int) -> Tuple[str, str]:
    '''
        0 <= prefixLevel <= getKeyLevel(key)
        >>> splitKeyAtLevel("Bodies", 0)
        ('Bodies', '')
        >>> splitKeyAtLevel("Bodies.Earth.mass", 1)
        ('Bodies.Earth', 'mass')
    '''
    keyNames = key.split('.')
    return ".".join(keyNames[:prefixLevel+1]), ".".join(keyNames[prefixLevel+1:])
