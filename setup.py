from setuptools import setup, find_packages
import os

install_requires = ["pydantic>=2.0"]

# Define optional dependencies for development
extras_require = {"dev": ["pytest"]}

setup(
    name="gherkin-ast-builder",
    version="0.1.0",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
    package_data={},
    python_requires=">=3.9",
    description="Builds a typed Gherkin document tree from the event stream of a Gherkin grammar parser.",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
