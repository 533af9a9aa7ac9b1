import pathlib
import re
import sys

from setuptools import setup

if sys.version_info < (3, 10):
    raise RuntimeError("cookiestorage requires Python 3.10+")


HERE = pathlib.Path(__file__).parent

txt = (HERE / "cookiestorage" / "__init__.py").read_text("utf-8")
try:
    version = re.findall(r'^__version__ = "([^"]+)"\r?$', txt, re.M)[0]
except IndexError:
    raise RuntimeError("Unable to determine version.")


install_requires = [
    "attrs>=21.3.0",
    "multidict>=6.0.0",
    "yarl>=1.9.0",
]

tests_require = [
    "freezegun",
    "pytest>=7.0",
]

setup(
    name="cookiestorage",
    version=version,
    description="Per-client HTTP cookie jar with replace-on-set policy",
    long_description=(HERE / "README.rst").read_text("utf-8"),
    long_description_content_type="text/x-rst",
    license="Apache 2",
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Internet :: WWW/HTTP",
    ],
    packages=["cookiestorage"],
    python_requires=">=3.10",
    install_requires=install_requires,
    extras_require={"test": tests_require},
    include_package_data=True,
)
