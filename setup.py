from setuptools import setup, find_packages

setup(
    name="antenna",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "typer",
        "requests",
        "pytz",
        "packageurl-python",
        "license-expression",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-requests",
            "types-pytz",
        ],
    },
    entry_points={
        "console_scripts": [
            "antenna=antenna.cli.main_cli:app",
        ],
    },
    description="Collects, reconciles and reports license facts of third-party artifacts",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
