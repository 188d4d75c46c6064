'''
Contains all of the test code to make sure the code in `RIGIDSIM` is running properly.
Directory structure mirrors that of RIGIDSIM, with additional data files.

All test/test_XXXX modules contains unit testing code for RIGIDSIM/XXXX.
Test/Example simulation definitions are in RIGIDSIM/Examples/Simulations and test/test_IO
'''
