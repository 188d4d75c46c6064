'''
Classes and functions for capturing simulation output (Logger) and describing the machine a simulation ran on (getSystemInfo)
'''

import sys
from datetime import datetime
from platform import platform, python_version

import numpy as np

import RIGIDSIM

__all__ = [ "Logger", "removeLogger", "getSystemInfo", "getSimDefinitionForOutput" ]

class Logger():
    '''
        Class intended to capture calls to print() and copy their contents to a list of strings, while still (optionally) printing them to the console

        Ex:
            logger = Logger(stringResultList)
            sys.stdout = logger

        Now anything passed into print() will be printed to the console and stored in stringResultList
    '''

    def __init__(self, stringListToCopyTo, continueWritingToTerminal=True):
        self.terminal = sys.__stdout__
        self.log = stringListToCopyTo
        self.continueWritingToTerminal = continueWritingToTerminal

    def write(self, msg):
        if self.continueWritingToTerminal:
            self.terminal.write(msg)
        self.log.append(msg)

    def flush(self):
        if self.continueWritingToTerminal:
            self.terminal.flush()

def removeLogger(restoreTo=None):
    ''' Stops capturing print output. sys.stdout is set to restoreTo if provided, otherwise to the interpreter's original stdout '''
    sys.stdout = sys.__stdout__ if restoreTo is None else restoreTo

def getSystemInfo(printToConsole=False):
    ''' Returns string list containing info about the package version, python version, platform and date '''
    result = []
    result.append("# RIGIDSIM {}, Python {}, numpy {}".format(RIGIDSIM.__version__, python_version(), np.__version__))

    now = datetime.now().strftime("%d/%m/%Y %H:%M:%S")
    result.append("# {}".format(now))

    try:
        result.append("# OS: {}".format(platform()))
    except OSError:
        # Some sandboxed/CI environments don't allow this
        result.append("# OS: Unknown")

    if printToConsole:
        for line in result:
            print(line)

    return result

def getSimDefinitionForOutput(simDefinition, printToConsole=True):
    ''' Returns a string list containing the parsed sim definition '''
    stringResultList = [ "# Using sim definition file: {}".format(simDefinition.fileName) ]
    stringResultList.append("---- Start Sim Definition ----")
    stringResultList += [ "{}: {}".format(key, value) for key, value in simDefinition.dict.items() ]
    stringResultList.append("---- End Sim Definition ----")

    if printToConsole:
        for line in stringResultList:
            print(line)

    return stringResultList
