'''
Script to run rigid body simulations from the command line
If RIGIDSIM has been installed with pip, this script is accessible through the 'rigidsim' command
'''

import argparse
import os
import sys
import time
from pathlib import Path

from RIGIDSIM.IO import SimDefinition
from RIGIDSIM.SimulationRunners import Simulation

simDefinitionExtension = ".rigidsim"

def buildParser() -> argparse.ArgumentParser:
    ''' Builds the command-line argument parser using argparse '''
    parser = argparse.ArgumentParser(formatter_class=argparse.RawTextHelpFormatter, description="""
    Run individual RIGIDSIM simulations.
    Expects simulations to be defined by simulation definition files like those in ./RIGIDSIM/Examples/Simulations
    """)

    parser.add_argument(
        "--silent",
        action='store_true',
        help="If present, does not output to console"
    )
    parser.add_argument(
        "simDefinitionFile",
        nargs='?',
        default="TwoBodyGravity.rigidsim",
        help="Path to a simulation definition (.rigidsim) file, or the name of one of the example cases"
    )

    return parser

def findSimDefinitionFile(providedPath):
    '''
        Returns the path to the simulation definition file, checking (in order):
            the provided path, then the example simulations folder, with and without the .rigidsim extension
        Returns None if the file can't be found
    '''
    # It is already a path, just return it
    if os.path.isfile(providedPath):
        return providedPath

    exampleLocation = Path(__file__).parent / "Examples" / "Simulations"

    possibleRelativePaths = [ providedPath ]
    if not providedPath.endswith(simDefinitionExtension):
        # If it's just the case name (ex: 'TwoBodyGravity') try also adding the file extension
        possibleRelativePaths.append(providedPath + simDefinitionExtension)

    for path in possibleRelativePaths:
        absPath = exampleLocation / path
        if absPath.is_file():
            return str(absPath)

    return None

def main(argv=None) -> int:
    '''
        Main function to run a RIGIDSIM simulation.
        Expects to be called from the command line, usually using the `rigidsim` command

        For testing purposes, can also pass a list of command line arguments into the argv parameter
    '''
    startTime = time.time()

    # Parse command line call, check for errors
    parser = buildParser()
    args = parser.parse_args(argv)

    # Load simulation definition file
    simDefPath = findSimDefinitionFile(args.simDefinitionFile)
    if simDefPath is None:
        print("ERROR: Unable to locate simulation definition file: {}! Checked whether the path was relative to the current command line location, or one of the example cases. To be sure that your file will be found, try using an absolute path.".format(args.simDefinitionFile), file=sys.stderr)
        return 1

    simDef = SimDefinition(simDefPath, silent=args.silent)

    simRunner = Simulation(simDefinition=simDef, silent=args.silent)
    simRunner.run()

    if not args.silent:
        simDef.printDefaultValuesUsed()
        simDef.printUnusedKeys()
        print("Run time: {:1.2f} seconds".format(time.time() - startTime))

    return 0

if __name__ == "__main__":
    sys.exit(main())
