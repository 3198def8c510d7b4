from setuptools import find_packages, setup

setup(
    name="timetrak-hours",
    version="0.1.0",
    description="CLI to compare this month's TimeTrakGo hours with the expected hours",
    packages=find_packages(exclude=["tests"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "python-dateutil",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'timetrak-hours=timetrak_hours.cli:main'
        ]
    }
)
