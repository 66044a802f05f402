from configparser import ConfigParser
from pathlib import Path as _Path

from setuptools import setup


def setup_package():
    check_version_file()
    setup()


def check_version_file():
    """Make sure the version declared in setup.cfg can be read.

    Notes
    -----
    The version is read from ``<project>/VERSION.txt`` both by setuptools and
    by the package at import time, so it must exist in the project scope.
    """
    config = ConfigParser()
    config.read(_Path(__file__).parent / "setup.cfg")
    project_name = config["metadata"]["name"]
    version_path = _Path(__file__).parent / project_name / "VERSION.txt"
    if not version_path.read_text().strip():
        raise RuntimeError(f"{version_path} is empty.")


if __name__ == "__main__":
    setup_package()
