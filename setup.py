from setuptools import setup, find_packages

setup(
    name="orgchart_desktop",
    version="0.1.0",
    description="Desktop shell for the OrgChart front end (greeting and native file export bridge)",
    author="Antigravity",
    packages=find_packages(include=["orgchart_desktop", "orgchart_desktop.*"]),
    install_requires=[
        "pydantic>=2.0",
        "pywebview>=5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "orgchart-desktop=orgchart_desktop.runtime.cli:main",
        ],
    },
    python_requires=">=3.9",
)
