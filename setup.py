from setuptools import setup, find_packages

setup(
    name="desktopentry",
    version="1.0.0",
    description="XDG .desktop entry parser with autostart filtering and Exec expansion",
    license="GPLv3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "desktopentry=desktopentry.main:main",
        ],
    },
)
