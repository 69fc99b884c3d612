"""
setup.py for localekit.

Usage:
    pip install -e .[test]
    localekit --dump
"""
from setuptools import find_packages, setup

about = {}
with open("localekit/__version__.py", encoding="utf-8") as f:
    exec(f.read(), about)

setup(
    name="localekit",
    version=about["__version__"],
    description="XML-driven runtime localization with bound pygame labels",
    python_requires=">=3.10",
    packages=find_packages(include=["localekit", "localekit.*"]),
    install_requires=[
        "pygame>=2.1",
        "PyYAML>=6.0",
        "pydantic>=2.0",
        "requests>=2.28",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "localekit=localekit.__main__:main",
        ],
    },
)
