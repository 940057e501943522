from setuptools import setup, find_packages

setup(
    name='irf_kinetics',
    version='0.1.0',
    packages=find_packages(include=['irf_kinetics', 'irf_kinetics.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'matplotlib'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'irf-kinetics=irf_kinetics.cli:main'
        ]
    }
)
