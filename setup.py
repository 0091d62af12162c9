#!/usr/bin/env python

from setuptools import find_packages, setup  # type: ignore

setup(
    name="mail-header-field",
    url="https://github.com/mail-header-field/mail-header-field",
    license="BSD License",
    author="mail-header-field contributors",
    description="Parse, validate and render single mail header fields with RFC 2047 encoding",
    long_description=open("README.rst").read(),
    use_scm_version={
        "write_to": "mail_header/version.py",
        "fallback_version": "0.1.0",
    },
    setup_requires=["setuptools_scm >= 3.4.3"],
    install_requires=["typing_extensions >= 4.0"],
    extras_require={
        "tests": [
            "flake8",
            "coverage",
            "build",
            "wheel",
            "mypy",
            "ruff",
        ]
    },
    packages=find_packages(exclude=["test"]),
    include_package_data=True,
    package_data={
        "mail_header": ["py.typed"],
    },
    python_requires=">=3.8",
    platforms=["MacOS X", "Posix"],
    test_suite="test",
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Communications :: Email",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
