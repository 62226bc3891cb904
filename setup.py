""" simecc build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import simecc

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=simecc.name,
    version=simecc.__version__,
    license=simecc.__license__,
    author=simecc.__author__,
    author_email=simecc.__author_email__,
    description="Elliptic curve point arithmetic and point encryption over Fp",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["simecc=simecc.cli:main"]},
    keywords="elliptic-curves cryptography elgamal secp256k1 education",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
