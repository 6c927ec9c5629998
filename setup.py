from setuptools import setup, find_packages

setup(
    name="zkpairing_package",
    version="0.1.0",
    description="A package for arithmetic in finite field towers and Tate pairings",
    url="https://github.com/yourusername/zkpairing_package",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
