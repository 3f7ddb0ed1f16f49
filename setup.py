from setuptools import setup

# because we have namespace packages without __init__.py
# which are not detected automatically by find_packages()
# we need to explicitly specify the packages
packages = [
    "phenology.version",
    "phenology.analysis",
    "phenology.dates",
    "phenology.statistics.core",
    "phenology.statistics.circular",
    "phenology.utilities",
]


import re

VERSIONFILE = "phenology/version/_version.py"
verstrline = open(VERSIONFILE, "rt").read()
VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, verstrline, re.M)
if mo:
    verstr = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))

setup(
    name="phenology-circular",
    version=verstr,
    packages=packages,
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.22",
        "scipy>=1.2",
        "numba",
        "pyyaml",
        "pandas",
    ],
    extras_require={"test": ["pytest"]},
    description="Circular statistics of the timing of seasonal events",
    license="GPL3",
    zip_safe=False,
    include_package_data=True,
)
