from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pathfinder",
    version="0.1.0",
    description="Best-first path search over implicitly defined graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "dev", "examples")),
    python_requires=">=3.10",
    extras_require={
        "nx": ["networkx"],
        "dev": ["pytest", "networkx"],
    },
)
