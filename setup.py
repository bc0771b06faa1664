from setuptools import find_namespace_packages, setup

setup(
    name="diskcleaner",
    version="0.1.0",
    description="Interactive directory size analyzer and cleanup tool",
    python_requires=">=3.12",
    packages=find_namespace_packages(include=["diskcleaner", "diskcleaner.*"]),
    install_requires=[
        "result",
        "rich",
        "textual",
        "typer",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "diskcleaner=diskcleaner.cli:app",
        ],
    },
)
