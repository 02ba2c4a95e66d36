"""
Setup script for TriTri.

Usage:
    pip install -e .           # Editable install
    pip install -e ".[dev]"    # With dev dependencies

The kernel is pure Python; numpy is only used at the array boundaries
(Triangle.from_array / to_array, TriTriResult.points_array).
"""

from setuptools import setup, find_packages


setup(
    name='tritri',
    version='0.1.0',
    description='Fast and robust triangle-triangle intersection in 3D',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=[
        'numpy',
    ],
    extras_require={
        'dev': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'tritri=tritri.__main__:main',
        ],
    },
)
