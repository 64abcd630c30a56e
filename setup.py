"""Setup file for the package."""

from setuptools import setup, find_packages

setup(
    name="rn-upgrade-helper-scraper",
    version="1.0.0",
    packages=find_packages(include=["upgrade_helper", "upgrade_helper.*"]),
    install_requires=[
        "playwright>=1.40.0",
        "python-dotenv>=1.0.0",
        "mcp>=1.10.0,<2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'upgrade-helper=upgrade_helper.main:main',
        ],
    },
    description="Read React Native upgrade diffs from the upgrade helper site over MCP",
    python_requires='>=3.10',
)
