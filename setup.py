from setuptools import find_packages, setup

setup(
    name="linewise",
    version="0.1.0",
    description="Transform text files line by line",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and command output models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pytest>=7.0",  # Testing framework
        "pytest-timeout>=2.1",  # Test timeouts
        "ruff",  # Linting and formatting
        "mypy",  # Static type checking
        "types-PyYAML",  # Type stubs
    ],
    entry_points={
        "console_scripts": [
            "linewise=linewise.cli:main",
        ],
    },
)
