''' Allows unittest to discover the doc tests in RIGIDSIM/IO/simDefinition.py and RIGIDSIM/IO/subDictReader.py '''

from RIGIDSIM.IO import simDefinition, subDictReader # Importing the modules (lower case), not the classes!


def load_tests(loader, tests, ignore):
    import doctest
    tests.addTests(doctest.DocTestSuite(simDefinition))
    tests.addTests(doctest.DocTestSuite(subDictReader))
    return tests
