from setuptools import setup, find_packages

setup(
    name = "tika-pipeline",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "beautifulsoup4>=4.9",
        "click>=8.0",
        "loguru",
        "pydantic>=2.0",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tika-pipeline=tika_pipeline.cli:main",
        ],
    },
    python_requires = ">=3.9",
)
