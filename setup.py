# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name="fixrat",
    version="0.1.0",
    description="Exact rational arithmetic on overflow-checked 64-bit integers",
    license="Apache-2.0",
    python_requires=">=3.10",
    packages=find_packages(include=["fixrat", "fixrat.*"]),
    package_data={
        "fixrat.core": ["*.lark"],
    },
    install_requires=[
        "atpublic",
        "lark",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fixrat=fixrat.__main__:main",
        ],
    },
)
