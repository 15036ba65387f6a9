"""Setup script for browser_telemetry."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="browser_telemetry",
    version="1.0.0",
    author="Browser Telemetry Team",
    author_email="team@example.com",
    description="Console, click and navigation capture from a Playwright browser, served over MCP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/browser_telemetry",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP :: Browsers",
        "Topic :: Software Development :: Debuggers",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "tests": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "browser-telemetry=browser_telemetry.cli.runner:main",
        ],
    },
)
