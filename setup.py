from setuptools import find_packages, setup

setup(
    name="mprank",
    version="0.1.0",
    description="Rank and unrank permutations of a multiset",
    packages=find_packages(include=["mprank", "mprank.*"]),
    python_requires=">=3.11",
    extras_require={"test": ["pytest"]},
)
