# -*- coding: utf-8 -*-
# File location: setup.py (in your project root)

import setuptools
import os

# Function to read the README file for the long description
def read_readme(fname):
    """Safely read the README file."""
    try:
        with open(os.path.join(os.path.dirname(__file__), fname), 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        return ""

# --- Configuration ---

# Distribution Name - How it will be known on PyPI or when installed (hyphens preferred)
PACKAGE_NAME = "house-price-prediction"
VERSION = "0.1.0"
DESCRIPTION = "Dense neural network regression of California median house values with PyTorch."
LICENSE_TYPE = "MIT"

# Runtime dependencies
INSTALL_REQUIRES = [
    'torch',
    'numpy',
    'pandas',
    'scikit-learn',
    'matplotlib',
    'plotly<7',
    'pyyaml',
    'tqdm',
]

# Development/testing tools
EXTRAS_REQUIRE = {
    'test': [
        'pytest',
    ],
}

# --- Setup Call ---

setuptools.setup(
    name=PACKAGE_NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=read_readme("README.md"),
    long_description_content_type="text/markdown",
    license=LICENSE_TYPE,

    # === src/ layout ===
    package_dir={'': 'src'},
    packages=setuptools.find_packages(where='src'),
    # ===================

    python_requires='>=3.8',

    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        f"License :: OSI Approved :: {LICENSE_TYPE} License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering",
    ],
)
