from pathlib import Path

from setuptools import find_packages, setup


_here = Path(__file__).parent.resolve()
_readme = _here / "README.md"
if not _readme.exists():
    raise AssertionError("Expected: %s to exist." % (_readme,))
README = _readme.read_text(encoding="utf-8")


def get_version():
    init_file = _here / "src" / "assoc_collections" / "__init__.py"
    for line in init_file.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    raise RuntimeError("Unable to find version string.")


setup(
    name="assoc-collections",
    version=get_version(),
    description="Ordered dicts and sets for keys which only provide an equality check (no hashing)",
    long_description=README,
    long_description_content_type="text/markdown",
    license="Apache License, Version 2.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.7",
    # No run-time dependencies: only the standard library is used.
    install_requires=[],
    # List additional groups of dependencies here (e.g. development
    # dependencies). You can install these using the following syntax,
    # for example:
    # $ pip install -e .[test]
    extras_require={
        "test": [
            "mock",
            "pytest",
            "pytest-xdist",
            "pytest-timeout",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
)
