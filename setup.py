"""Setup configuration for WalkTreeLib."""

from setuptools import setup, find_packages

setup(
    name="walktreelib",
    version="0.3.0",
    description="Resumable PRE/LEAF/POST tree walking for any in-memory tree",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
    install_requires=[
        # No runtime dependencies
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
)
