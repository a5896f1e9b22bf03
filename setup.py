from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with the test dependencies
#   'pip install -e .[test]'
"""

INSTALL_REQUIRES = [
    "msgspec>=0.18",
]

TEST_REQUIRES = [
    "pytest>=8.0",
    "pytest-asyncio>=0.23",
]


setup(
    name="logweave",
    version="0.1.0",
    description="Level-gated logging with JSON-configured loggers and handlers",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=INSTALL_REQUIRES,
    extras_require={"test": TEST_REQUIRES},
)
