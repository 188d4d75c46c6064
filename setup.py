import setuptools
from setuptools import setup

import RIGIDSIM


#### Get/Set info to be passed into setup() ####
with open("README.md", "r") as fh:
    long_description = fh.read()

with open("requirements.txt") as reqFile:
    install_reqs = [ line.strip() for line in reqFile.readlines() if line.strip() != "" and not line.startswith("#") ]

setup(
    name='RIGIDSIM',
    version=RIGIDSIM.__version__,
    description="A compact rigid body simulator: generic explicit Runge-Kutta integration of mutually gravitating rigid bodies",
    install_requires=install_reqs,
    license='MIT',
    long_description = long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=[ "test", "test.*", ]),
    package_data={ "RIGIDSIM": [ "Examples/Simulations/*.rigidsim" ] },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Topic :: Scientific/Engineering :: Physics",
    ],
    extras_require={ "test": [ "pytest" ] },

    python_requires='>=3.6',
    zip_safe=False,

    entry_points={
        'console_scripts': [
            'rigidsim = RIGIDSIM.Main:main' ]
    }
)
