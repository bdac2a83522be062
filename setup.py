from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "defusedxml>=0.7.1",
    "pandas>=1.5.0",
    "tqdm>=4.64.0",
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="svg_to_icon",
    version="0.1.0",
    description="A tool to convert SVG files into icon components",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-to-icon=svg_to_icon.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
