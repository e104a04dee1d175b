from setuptools import setup, find_packages

setup(
    name="checkers-engine",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "checkers=checkers.__main__:main",
        ],
    },
    author="Checkers Engine Team",
    description="Two-player checkers rule engine with multi-jump capture search and undo",
)
