from setuptools import setup, find_packages

setup(
    name="tagline",
    version="0.1.0",
    description="Styled format templates rendered to ANSI terminal escape sequences",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
)
