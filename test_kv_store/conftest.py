""" Configure the tests """

from pathlib import Path
from shutil import rmtree

import pytest


TESTING_DIR = Path(__file__).parent / "tmp"


def pytest_sessionstart():
    """
    Create the temporary directory to store the test results
    before running the tests.
    """
    if TESTING_DIR.is_dir():
        rmtree(TESTING_DIR)
    TESTING_DIR.mkdir(exist_ok=True)


def pytest_sessionfinish():
    """
    Remove the temporary directory after whole test run finished.
    """
    if TESTING_DIR.is_dir():
        rmtree(TESTING_DIR)


@pytest.fixture()
def temporary_directory():
    """
    Return the path for the temporary directory.
    """
    TESTING_DIR.mkdir(exist_ok=True)
    return TESTING_DIR
