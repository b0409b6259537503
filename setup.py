from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="trafficreport",
    version="0.1.0",
    description="HTML reports for API traffic validation and coverage runs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={
        "trafficreport.schemas": ["*.json"],
        "trafficreport.templates": ["*.j2"],
    },
    python_requires=">=3.10",
    install_requires=[
        "httpx",
        "jinja2",
        "jsonschema",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    entry_points={
        "console_scripts": ["trafficreport=trafficreport.cli:main"],
    },
)
