import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='gps-tracker-server',
    version='1.0.0',
    license='MIT',
    description='Receives student GPS reports and serves them to a live map.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={'tracker': ['static/*.html']},
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8',
        'aiohttp-cors>=0.8',
        'marshmallow>=3.13',
        'tortoise-orm[asyncpg]>=0.21',
        'asyncpg',
        'uvloop',
        'sentry-sdk',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-aiohttp>=1.0',
            'pytest-asyncio',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['tracker=tracker.cli:run'],
    },
)
