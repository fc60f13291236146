from setuptools import find_packages, setup

"""
# Usage instructions
#
# To install the package
#   'pip install .'
#
# To install with test dependencies
#   'pip install -e .[test]'
"""

setup(
    name="cipher_bench",
    version="0.1.0",
    description="Benchmark-matrix runner for symmetric block ciphers",
    python_requires=">=3.11",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "cryptography>=42",
        "msgspec>=0.18",
        "numpy>=1.26",
    ],
    extras_require={
        "test": [
            "pytest>=8",
        ],
    },
    entry_points={
        "console_scripts": [
            "cipher-bench=cipher_bench.cli:default_main",
        ],
    },
)
