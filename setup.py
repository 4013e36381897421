import os

from setuptools import find_packages, setup


# read the version from the VERSION file
def get_version():
    with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
        return version_file.read().strip()


# Set the version in the kinesis_shapes/version.py file
def set_version_constant(version: str):
    with open(
        os.path.join(os.path.dirname(__file__), "kinesis_shapes", "version.py"), "w"
    ) as version_file:
        version_file.write(f'__version__ = "{version}"\n')


version = get_version()
set_version_constant(version)

setup(
    name="kinesis-shapes",
    version=version,
    description="Immutable, validated value objects for Amazon Kinesis API responses",
    packages=find_packages(include=["kinesis_shapes", "kinesis_shapes.*"]),
    python_requires=">=3.8",
    install_requires=[
        "botocore>=1.31",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
