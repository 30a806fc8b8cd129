from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dagpath",
    version="0.1.0",
    description="Shortest paths in directed acyclic graphs over indexed or lazily discovered vertices.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    install_requires=["networkx"],
    tests_require=["pytest", "pytest-benchmark", "networkx"],
    extras_require={
        "test": ["pytest", "pytest-benchmark"],
        "dev": ["line_profiler"],
    },
)
