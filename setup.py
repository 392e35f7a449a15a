from pathlib import Path

from setuptools import find_packages, setup

README = Path(__file__).with_name("README.md")

setup(
    name="ebupot_reader",
    version=__import__("ebupot_reader").__version__,
    description="Field extraction for Indonesian withholding-tax certificates (e-Bupot)",
    long_description=README.read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    author="Ebupot Reader contributors",
    license="mit",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    install_requires=[
        "PyMuPDF>=1.23.0",  # PDF text layer extraction
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
