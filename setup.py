from setuptools import setup, find_packages

setup(
    name="expandable_grid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"expandable_grid": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "growth_report=tools.growth_report:main",
        ]
    },
)
