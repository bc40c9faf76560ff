from setuptools import setup, find_packages
import pathlib

# Detect layout
use_src = pathlib.Path("src/beerxml").exists()
pkg_args = {"package_dir": {"": "src"}, "packages": find_packages(where="src")} if use_src \
           else {"packages": find_packages(where=".")}

setup(
    name="beerxml-tools",
    version="0.1.0",
    python_requires=">=3.9",
    include_package_data=True,
    package_data={"beerxml": ["templates/*.j2"]},
    install_requires=[
        "pydantic>=2",
        "typer",
        "PyYAML",
        "Jinja2",
        "jsonschema",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["beerxml=beerxml.cli:app"]},
    **pkg_args
)
