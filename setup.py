"""Setup script for site_percolation package."""

from setuptools import setup, find_packages

setup(
    name="site_percolation",
    version="1.0.0",
    description="Site percolation on an N-by-N grid with backwash-free union-find connectivity",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20",
        "pandas>=1.3",
        "scipy>=1.7",
        "pyyaml>=5.4",
        "click>=8.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "site-perc=site_percolation.cli.main:cli",
        ],
    },
)
