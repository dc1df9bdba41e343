"""Setup configuration for onbfield."""

from setuptools import find_packages, setup

setup(
    name="onbfield",
    version="0.1.0",
    description=(
        "GF(2^233) arithmetic in a type II optimal normal basis: "
        "rotation squaring, sparse-matrix multiplication and "
        "Itoh-Tsujii inversion"
    ),
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="onbfield Contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.24",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "onbfield-bench=onbfield.bench:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Security :: Cryptography",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
