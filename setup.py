""" ecsig build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecsig

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecsig.name,
    version=ecsig.__version__,
    license=ecsig.__license__,
    author=ecsig.__author__,
    author_email=ecsig.__author_email__,
    description="ECDSA with FIPS 186-4 per-message secret generation",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"ecsig.ecc": ["data/*.json"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "coincurve"],
        "docs": ["sphinx", "sphinx_rtd_theme", "myst_parser"],
    },
    keywords="cryptography elliptic-curves ecdsa FIPS-186-4 secp256r1 secp256k1",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
