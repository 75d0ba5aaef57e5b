from setuptools import find_packages, setup

setup(
    name="panel-mapper",
    version="0.1.0",
    description="Map visible pixel coordinates onto chains of LED matrix panels",
    author="Garrett Johnson",
    packages=find_packages(include=["panel_mapper", "panel_mapper.*"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.23.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["panel-mapper=panel_mapper.main:main"],
    },
)
