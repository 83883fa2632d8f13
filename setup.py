from setuptools import setup, find_packages

with open("README.md", "r") as fh:
    long_description  =  fh.read()

setup(
    name = 'ljcluster',
    version = '0.1.0',
    author = 'ljcluster developers',
    description = 'Build and score Lennard-Jones clusters with a soft spherical confinement',
    long_description = long_description,
    long_description_content_type = "text/markdown",
    keywords = 'Lennard-Jones cluster molecular simulation',
    classifiers  =  [
        'Development Status :: 3 - Alpha',
        'Topic :: Scientific/Engineering :: Physics',
        'Topic :: Scientific/Engineering :: Chemistry',
        'Programming Language :: Python :: 3.9'
    ],
    packages = find_packages(),
    package_data = {
        "ljcluster": [
            "test/data/*",
        ]
    },
    entry_points = {
        'console_scripts': ['ljcluster = ljcluster.__main__:main']
    },
    tests_require = ['pytest', 'pytest-xdist'],
    extras_require = {
        'test': ['pytest >= 6.2.0', 'pytest-xdist >= 2.3.0']
    },
    install_requires = [
        'numpy >= 1.20.0',
        'numba >= 0.54.0'
    ],
    python_requires = '>=3.9'
)
